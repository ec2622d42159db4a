"""Pure tree operations: evaluate, differentiate, render, simplify."""

from .evaluator import evaluate, evaluate_batch, apply_function, apply_operation
from .differentiator import differentiate, nth_derivative
from .renderer import render, format_constant, format_number
from .simplifier import ExpressionSimplifier, simplify

__all__ = [
    'evaluate', 'evaluate_batch', 'apply_function', 'apply_operation',
    'differentiate', 'nth_derivative',
    'render', 'format_constant', 'format_number',
    'ExpressionSimplifier', 'simplify'
]
