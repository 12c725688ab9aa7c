"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, find_nodes_by_operator,
    get_function_usage_counts, contains_literal_zero_division
)

__all__ = [
    'ExpressionSimplifier',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type', 'find_nodes_by_operator',
    'get_function_usage_counts', 'contains_literal_zero_division'
]
