import numbers
from typing import Set

from ..core.node import Node, Constant, BinaryOp, UnaryCall, Variable
from ..core.operators import Operation, Function
from ...exceptions import ExpressionError, InvalidExpression, UnknownFunction, UnknownOperator


class ExpressionValidator:
  """Structural checks for trees built outside the node constructors"""

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    try:
      ExpressionValidator.validate(node)
      return True
    except ExpressionError:
      return False

  @staticmethod
  def validate(node: Node):
    """Raise on the first structural problem found.

    Raises:
        UnknownOperator: a BinaryOp with an operator outside Operation
        UnknownFunction: a UnaryCall with a function outside Function
        InvalidExpression: non-node children, non-numeric constants,
            unnamed variables, or a cycle
    """
    ExpressionValidator._validate_recursive(node, set(), set())

  @staticmethod
  def _validate_recursive(node: Node, path: Set[int], checked: Set[int]):
    key = id(node)
    if key in path:
      raise InvalidExpression("Expression contains a cycle")
    if key in checked:
      return

    if isinstance(node, Constant):
      if not isinstance(node.value, numbers.Number):
        raise InvalidExpression(f"Constant value {node.value!r} is not a number")

    elif isinstance(node, Variable):
      if not isinstance(node.name, str) or not node.name:
        raise InvalidExpression(f"Variable name {node.name!r} must be a non-empty string")

    elif isinstance(node, UnaryCall):
      if not isinstance(node.function, Function):
        raise UnknownFunction(f"Unknown function: {node.function!r}")

    elif isinstance(node, BinaryOp):
      if not isinstance(node.op, Operation):
        raise UnknownOperator(f"Unknown operation: {node.op!r}")

    else:
      raise InvalidExpression(f"{type(node).__name__} is not an expression node")

    path.add(key)
    for child in node.children():
      ExpressionValidator._validate_recursive(child, path, checked)
    path.discard(key)
    checked.add(key)
