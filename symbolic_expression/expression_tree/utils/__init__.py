"""Utilities for expression trees."""

from .sympy_utils import to_sympy, latex_representation
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_constants, get_variables,
    get_variable_usage_counts, count_shared_subtrees, substitute
)

__all__ = [
    'to_sympy', 'latex_representation', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'get_constants', 'get_variables',
    'get_variable_usage_counts', 'count_shared_subtrees', 'substitute'
]
