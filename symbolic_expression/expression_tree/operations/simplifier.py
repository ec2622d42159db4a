from ..core.node import Node, Constant, Variable, UnaryCall, BinaryOp
from ..core.operators import Operation
from ..core.field import NumericField, REAL
from ...exceptions import DivisionByZero, InvalidExpression, UnknownOperator
from ...logging_system import LogLevel, get_logger, log_debug, log_operation
from .evaluator import evaluate


class ExpressionSimplifier:
  """Single bottom-up rewrite pass over a fixed set of identities.

  Children are simplified first, then the node itself is checked for
  constant folding and the zero/one identities of +, -, * and /. Rewritten
  positions get fresh nodes; untouched subtrees are returned as-is, so
  shared subtrees are never modified.
  """

  def __init__(self, field: NumericField = REAL):
    self.field = field
    self.rewrites = 0

  def simplify(self, node: Node) -> Node:
    if isinstance(node, (Constant, Variable)):
      return node

    elif isinstance(node, UnaryCall):
      operand = self.simplify(node.operand)
      if operand is node.operand:
        return node
      return UnaryCall(node.function, operand)

    elif isinstance(node, BinaryOp):
      left = self.simplify(node.left)
      right = self.simplify(node.right)
      rewritten = self._apply_simplification_rules(node.op, left, right)
      if rewritten is not None:
        self.rewrites += 1
        return rewritten
      if left is node.left and right is node.right:
        return node
      return BinaryOp(node.op, left, right)

    raise InvalidExpression(f"Cannot simplify object of type {type(node).__name__}")

  def _is_zero(self, node: Node) -> bool:
    return isinstance(node, Constant) and self.field.is_zero(node.value)

  def _is_one(self, node: Node) -> bool:
    return isinstance(node, Constant) and self.field.is_one(node.value)

  def _fold(self, op: Operation, left: Constant, right: Constant) -> Constant:
    # Both sides are constants, so the empty binding table is sufficient
    value = evaluate(BinaryOp(op, left, right), {}, self.field)
    log_debug(f"folded {op.name} of constants to {value}")
    return Constant(value)

  def _apply_simplification_rules(self, op: Operation, left: Node, right: Node):
    both_constant = isinstance(left, Constant) and isinstance(right, Constant)

    if op == Operation.ADD or op == Operation.SUB:
      if both_constant:
        return self._fold(op, left, right)
      if self._is_zero(right):
        return left  # x + 0 = x, x - 0 = x
      if self._is_zero(left):
        if op == Operation.ADD:
          return right  # 0 + x = x
        return BinaryOp(Operation.MUL, Constant(self.field.coerce(-1)), right)  # 0 - x = (-1) * x

    elif op == Operation.MUL:
      if both_constant:
        return self._fold(op, left, right)
      if self._is_zero(left) or self._is_zero(right):
        return Constant(self.field.zero())
      if self._is_one(left):
        return right
      if self._is_one(right):
        return left

    elif op == Operation.DIV:
      if self._is_zero(right):
        raise DivisionByZero("Simplified a division by the constant zero")
      if both_constant:
        return self._fold(op, left, right)
      if self._is_zero(left):
        return Constant(self.field.zero())
      if self._is_one(right):
        return left

    elif op == Operation.POW:
      if both_constant:
        return self._fold(op, left, right)

    else:
      raise UnknownOperator(f"Unknown operation: {op!r}")

    return None


def simplify(node: Node, field: NumericField = REAL) -> Node:
  """Simplify a tree with one bottom-up pass of algebraic identities"""
  simplifier = ExpressionSimplifier(field)
  result = simplifier.simplify(node)
  if get_logger().should_log(LogLevel.DETAILED):
    log_operation('simplify', f"{simplifier.rewrites} rewrites, {node.size()} -> {result.size()} nodes")
  return result
