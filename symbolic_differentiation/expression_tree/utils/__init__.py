"""Utilities for expression trees."""

from .sympy_utils import SymPyConverter
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, calculate_subtree_sizes,
    find_nodes_by_type, find_nodes_by_operator, get_constants,
    get_variables, get_variable_names, contains_variable
)

__all__ = [
    'SymPyConverter', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'calculate_subtree_sizes',
    'find_nodes_by_type', 'find_nodes_by_operator', 'get_constants',
    'get_variables', 'get_variable_names', 'contains_variable'
]
