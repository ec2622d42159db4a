"""Core expression tree components."""

from .node import (
    Node, Constant, Variable, UnaryCall, BinaryOp,
    as_node, const, var, sin, cos, ln, exp
)
from .operators import (
    NodeType, Operation, Function, OPERATION_SYMBOLS, FUNCTION_NAMES,
    BINARY_OP_MAP, UNARY_OP_MAP,
    evaluate_binary_op, evaluate_unary_op
)
from .field import NumericField, RealField, ComplexField, REAL, COMPLEX, FIELDS, field_for_name

__all__ = [
    'Node', 'Constant', 'Variable', 'UnaryCall', 'BinaryOp',
    'as_node', 'const', 'var', 'sin', 'cos', 'ln', 'exp',
    'NodeType', 'Operation', 'Function', 'OPERATION_SYMBOLS', 'FUNCTION_NAMES',
    'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'evaluate_binary_op', 'evaluate_unary_op',
    'NumericField', 'RealField', 'ComplexField', 'REAL', 'COMPLEX', 'FIELDS', 'field_for_name'
]
