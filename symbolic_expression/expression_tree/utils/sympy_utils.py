import sympy as sp

from ..core.node import Node, Constant, Variable, UnaryCall, BinaryOp
from ..core.operators import Operation, Function
from ...exceptions import InvalidExpression, UnknownFunction, UnknownOperator


_SYMPY_FUNCTIONS = {
  Function.SIN: sp.sin,
  Function.COS: sp.cos,
  Function.LN: sp.log,
  Function.EXP: sp.exp,
}


def _sympy_number(value) -> sp.Expr:
  value = float(value)
  if value.is_integer():
    return sp.Integer(int(value))
  return sp.Float(value)


def constant_to_sympy(value) -> sp.Expr:
  if isinstance(value, complex):
    return _sympy_number(value.real) + sp.I * _sympy_number(value.imag)
  return _sympy_number(value)


def to_sympy(node: Node) -> sp.Expr:
  """Convert a tree to an equivalent sympy expression.

  Integral constants become exact sympy Integers so that symbolic
  comparisons (derivative cross-checks) are not thrown off by float noise.
  """
  if isinstance(node, Constant):
    return constant_to_sympy(node.value)

  elif isinstance(node, Variable):
    return sp.Symbol(node.name)

  elif isinstance(node, UnaryCall):
    func = _SYMPY_FUNCTIONS.get(node.function)
    if func is None:
      raise UnknownFunction(f"Unknown function: {node.function!r}")
    return func(to_sympy(node.operand))

  elif isinstance(node, BinaryOp):
    left = to_sympy(node.left)
    right = to_sympy(node.right)
    if node.op == Operation.ADD:
      return sp.Add(left, right)
    elif node.op == Operation.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif node.op == Operation.MUL:
      return sp.Mul(left, right)
    elif node.op == Operation.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    elif node.op == Operation.POW:
      return sp.Pow(left, right)
    raise UnknownOperator(f"Unknown operation: {node.op!r}")

  raise InvalidExpression(f"Cannot convert object of type {type(node).__name__} to sympy")


def latex_representation(node: Node) -> str:
  """LaTeX for the tree, as typeset by sympy"""
  return sp.latex(to_sympy(node))
