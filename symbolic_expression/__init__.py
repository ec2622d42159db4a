"""Symbolic Expression Package

Build expression trees programmatically, then evaluate, differentiate,
render and simplify them over real or complex numbers.
"""

from .expression_tree import (
  Expression, EngineConfig, UnboundVariablePolicy,
  Node, Constant, Variable, UnaryCall, BinaryOp,
  as_node, const, var, sin, cos, ln, exp,
  Operation, Function,
  NumericField, RealField, ComplexField, REAL, COMPLEX, field_for_name,
  evaluate, evaluate_batch, differentiate, nth_derivative, render, simplify, ExpressionSimplifier,
  ExpressionValidator, to_sympy, latex_representation, substitute
)
from .exceptions import (
  ExpressionError, DivisionByZero, UnboundVariable, UnsupportedOperation,
  UnknownOperator, UnknownFunction, InvalidExpression, DerivativeApproximationWarning
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "EngineConfig", "UnboundVariablePolicy",
  "Node", "Constant", "Variable", "UnaryCall", "BinaryOp",
  "as_node", "const", "var", "sin", "cos", "ln", "exp",
  "Operation", "Function",
  "NumericField", "RealField", "ComplexField", "REAL", "COMPLEX", "field_for_name",
  "evaluate", "evaluate_batch", "differentiate", "nth_derivative", "render", "simplify", "ExpressionSimplifier",
  "ExpressionValidator", "to_sympy", "latex_representation", "substitute",
  "ExpressionError", "DivisionByZero", "UnboundVariable", "UnsupportedOperation",
  "UnknownOperator", "UnknownFunction", "InvalidExpression", "DerivativeApproximationWarning",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
