"""Exception and warning types raised by expression operations."""


class ExpressionError(Exception):
  "Base exception for errors raised while building or operating on expression trees."
  pass


class DivisionByZero(ExpressionError, ZeroDivisionError):
  "A division (or negative power) had a denominator equal to the field zero."
  pass


class UnboundVariable(ExpressionError, KeyError):
  "A variable was evaluated without a value in the binding table."

  def __init__(self, name: str):
    super().__init__(name)
    self.name = name

  def __str__(self) -> str:
    return f"Variable '{self.name}' has no binding"


class UnsupportedOperation(ExpressionError):
  "The requested operation is not available for the chosen numeric field."
  pass


class UnknownOperator(ExpressionError):
  "A binary node carried an operator outside the supported set."
  pass


class UnknownFunction(ExpressionError):
  "A unary node carried a function outside the supported set."
  pass


class InvalidExpression(ExpressionError):
  "A tree is structurally malformed (wrong node types, cycles, bad names)."
  pass


class DerivativeApproximationWarning(UserWarning):
  "A differentiation rule produced a result that is not the true derivative."
  pass
