"""Expression Tree Module

Expression trees over a numeric field, with evaluation, symbolic
differentiation, rendering and simplification.
"""

from .expression import Expression
from .config import EngineConfig, UnboundVariablePolicy
from .core import (
    Node, Constant, Variable, UnaryCall, BinaryOp,
    as_node, const, var, sin, cos, ln, exp,
    NodeType, Operation, Function, OPERATION_SYMBOLS, FUNCTION_NAMES,
    NumericField, RealField, ComplexField, REAL, COMPLEX, field_for_name
)
from .operations import (
    evaluate, evaluate_batch, differentiate, nth_derivative, render,
    simplify, ExpressionSimplifier
)
from .utils import ExpressionValidator, to_sympy, latex_representation, substitute

__all__ = [
    "Expression", "EngineConfig", "UnboundVariablePolicy",
    "Node", "Constant", "Variable", "UnaryCall", "BinaryOp",
    "as_node", "const", "var", "sin", "cos", "ln", "exp",
    "NodeType", "Operation", "Function", "OPERATION_SYMBOLS", "FUNCTION_NAMES",
    "NumericField", "RealField", "ComplexField", "REAL", "COMPLEX", "field_for_name",
    "evaluate", "evaluate_batch", "differentiate", "nth_derivative", "render",
    "simplify", "ExpressionSimplifier",
    "ExpressionValidator", "to_sympy", "latex_representation", "substitute"
]
