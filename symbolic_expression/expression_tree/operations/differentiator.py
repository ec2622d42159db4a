"""
Symbolic differentiation.

Results are returned unsimplified; callers run simplify() on them. Subtrees of
the input are reused by reference in the derivative, which is safe because
nodes are immutable.

Two Pow rules are kept for compatibility even though they are not the true
derivative in every case:

* constant exponent c <= 1 (c != 1): ``(c * f') / f^(|c| + 1)``. This agrees
  with the power rule for c <= 0 but not for 0 < c < 1.
* ``f(x)^g(x)``: ``g' * ln(f) + g * (f' / f)``, the derivative of
  ``g * ln(f)`` rather than of ``f^g``.

Both emit a DerivativeApproximationWarning when the result is wrong. The
``c == 1`` rule returns the constant one and ignores f'.
"""

import warnings

from ..core.node import Node, Constant, Variable, UnaryCall, BinaryOp
from ..core.operators import Operation, Function
from ..core.field import NumericField, REAL
from ...exceptions import (
  DerivativeApproximationWarning, InvalidExpression, UnknownFunction, UnknownOperator,
  UnsupportedOperation
)
from ...logging_system import LogLevel, get_logger, log_debug, log_operation


def differentiate(node: Node, variable: str, field: NumericField = REAL, *, stacklevel: int = 1) -> Node:
  """Derivative of ``node`` with respect to ``variable``.

  Raises UnsupportedOperation when the tree contains a power and the field
  cannot differentiate powers (the complex field). ``stacklevel`` works as in
  warnings.warn: 1 attributes approximation warnings to the direct caller.
  """
  if not field.supports_power_derivative and _contains_power(node):
    raise UnsupportedOperation(
      f"Differentiating '^' is not supported in the {field.name} field")
  notes = []
  result = _diff(node, variable, field, notes)
  for message in notes:
    warnings.warn(message, DerivativeApproximationWarning, stacklevel=stacklevel + 1)
  if get_logger().should_log(LogLevel.DETAILED):
    log_operation('differentiate', f"d/d{variable}: {node.size()} -> {result.size()} nodes")
  return result


def nth_derivative(node: Node, variable: str, order: int, field: NumericField = REAL) -> Node:
  """Differentiate ``order`` times, simplifying after each step"""
  from .simplifier import simplify

  if order < 0:
    raise ValueError(f"Derivative order must be non-negative, got {order}")
  for _ in range(order):
    node = simplify(differentiate(node, variable, field, stacklevel=2), field)
  return node


def _contains_power(node: Node) -> bool:
  stack = [node]
  seen = set()
  while stack:
    current = stack.pop()
    if id(current) in seen:
      continue
    seen.add(id(current))
    if isinstance(current, BinaryOp) and current.op == Operation.POW:
      return True
    stack.extend(current.children())
  return False


def _diff(node: Node, variable: str, field: NumericField, notes: list) -> Node:
  if isinstance(node, Constant):
    return Constant(field.zero())

  elif isinstance(node, Variable):
    return Constant(field.one() if node.name == variable else field.zero())

  elif isinstance(node, UnaryCall):
    return _diff_unary(node, variable, field, notes)

  elif isinstance(node, BinaryOp):
    return _diff_binary(node, variable, field, notes)

  raise InvalidExpression(f"Cannot differentiate object of type {type(node).__name__}")


def _diff_unary(node: UnaryCall, variable: str, field: NumericField, notes: list) -> Node:
  u = node.operand
  du = _diff(u, variable, field, notes)

  if node.function == Function.SIN:
    return BinaryOp(Operation.MUL, UnaryCall(Function.COS, u), du)
  elif node.function == Function.COS:
    minus_sin = BinaryOp(Operation.MUL, Constant(field.coerce(-1)), UnaryCall(Function.SIN, u))
    return BinaryOp(Operation.MUL, minus_sin, du)
  elif node.function == Function.LN:
    return BinaryOp(Operation.DIV, du, u)
  elif node.function == Function.EXP:
    return BinaryOp(Operation.MUL, UnaryCall(Function.EXP, u), du)
  raise UnknownFunction(f"Unknown function: {node.function!r}")


def _diff_binary(node: BinaryOp, variable: str, field: NumericField, notes: list) -> Node:
  left, right = node.left, node.right
  dl = _diff(left, variable, field, notes)
  dr = _diff(right, variable, field, notes)

  if node.op == Operation.ADD:
    return BinaryOp(Operation.ADD, dl, dr)

  elif node.op == Operation.SUB:
    return BinaryOp(Operation.SUB, dl, dr)

  elif node.op == Operation.MUL:
    return BinaryOp(Operation.ADD,
                    BinaryOp(Operation.MUL, dl, right),
                    BinaryOp(Operation.MUL, left, dr))

  elif node.op == Operation.DIV:
    numerator = BinaryOp(Operation.SUB,
                         BinaryOp(Operation.MUL, dl, right),
                         BinaryOp(Operation.MUL, left, dr))
    denominator = BinaryOp(Operation.POW, right, Constant(field.coerce(2)))
    return BinaryOp(Operation.DIV, numerator, denominator)

  elif node.op == Operation.POW:
    if not field.supports_power_derivative:
      raise UnsupportedOperation(
        f"Differentiating '^' is not supported in the {field.name} field")
    return _diff_power(left, right, dl, dr, field, notes)

  raise UnknownOperator(f"Unknown operation: {node.op!r}")


def _diff_power(left: Node, right: Node, dl: Node, dr: Node, field: NumericField, notes: list) -> Node:
  one = field.one()

  # f(x) ^ c
  if isinstance(right, Constant):
    c = field.coerce(right.value)
    if field.greater_than(c, one):
      lowered = BinaryOp(Operation.POW, left, Constant(field.sub(c, one)))
      return BinaryOp(Operation.MUL, right, BinaryOp(Operation.MUL, lowered, dl))

    if field.eq(c, one):
      if dl != Constant(one):
        _note_approximation(notes, f"d/dx f^1 returned 1, dropping f' = {dl!r}")
      return Constant(one)

    if field.greater_than(c, field.zero()):
      _note_approximation(notes, f"power rule for exponent {c} in (0, 1) uses |c| + 1")
    log_debug(f"power rule for exponent {c} <= 1")
    numerator = BinaryOp(Operation.MUL, right, dl)
    power = Constant(field.add(field.abs(c), one))
    return BinaryOp(Operation.DIV, numerator, BinaryOp(Operation.POW, left, power))

  # a ^ g(x)
  if isinstance(left, Constant):
    growth = BinaryOp(Operation.MUL,
                      BinaryOp(Operation.POW, left, right),
                      UnaryCall(Function.LN, left))
    return BinaryOp(Operation.MUL, dr, growth)

  # f(x) ^ g(x)
  _note_approximation(notes, "f(x)^g(x) differentiated as g' * ln(f) + g * f'/f")
  term1 = BinaryOp(Operation.MUL, dr, UnaryCall(Function.LN, left))
  term2 = BinaryOp(Operation.MUL, right, BinaryOp(Operation.DIV, dl, left))
  return BinaryOp(Operation.ADD, term1, term2)


def _note_approximation(notes: list, message: str):
  log_debug(message)
  notes.append(message)
