from ..core.node import Node, Constant, Variable, UnaryCall, BinaryOp
from ..core.operators import OPERATION_SYMBOLS, FUNCTION_NAMES
from ...exceptions import InvalidExpression, UnknownFunction, UnknownOperator


def format_number(value) -> str:
  """Integral values print without a fractional part, others with six decimals"""
  value = float(value)
  if value.is_integer():
    return str(int(value))
  return f"{value:f}"


def format_constant(value) -> str:
  if isinstance(value, complex):
    re, im = value.real, value.imag
    if re != 0 and im != 0:
      if im >= 0:
        return f"({format_number(re)} + {format_number(im)}i)"
      return f"({format_number(re)} - {format_number(-im)}i)"
    if re == 0 and im == 0:
      return format_number(0)
    if re == 0:
      return f"{format_number(im)}i"
    return format_number(re)

  if value < 0:
    return f"({format_number(value)})"
  return format_number(value)


def render(node: Node) -> str:
  """Fully parenthesized infix rendering, e.g. ``(x + 2)`` or ``sin(x + 1)``"""
  if isinstance(node, Constant):
    return format_constant(node.value)

  elif isinstance(node, Variable):
    return node.name

  elif isinstance(node, UnaryCall):
    name = FUNCTION_NAMES.get(node.function)
    if name is None:
      raise UnknownFunction(f"Unknown function: {node.function!r}")
    # A binary operand already renders its own parentheses
    if isinstance(node.operand, BinaryOp):
      return name + render(node.operand)
    return f"{name}({render(node.operand)})"

  elif isinstance(node, BinaryOp):
    symbol = OPERATION_SYMBOLS.get(node.op)
    if symbol is None:
      raise UnknownOperator(f"Unknown operation: {node.op!r}")
    return f"({render(node.left)} {symbol} {render(node.right)})"

  raise InvalidExpression(f"Cannot render object of type {type(node).__name__}")
