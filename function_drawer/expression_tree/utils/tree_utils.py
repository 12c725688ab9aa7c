"""
Tree Utility Functions

Traversal and query helpers for expression trees. Trees are read-only here;
nothing in this module mutates a node.
"""

from typing import List, Type, TypeVar
from collections import Counter

from ..core.node import Node, BinaryOpNode, FunctionNode, ConstantNode

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order depth-first traversal (iterative so deep trees are safe)"""
    stack = [node]
    nodes = []

    while stack:
        current_node = stack.pop()
        nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree without recursion.

    Leaf nodes have depth 1.
    """
    max_depth = 0
    stack = [(node, 1)]
    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in current_node.children():
            stack.append((child, depth + 1))
    return max_depth


def find_nodes_by_type(node: Node, node_class: Type[T]) -> List[T]:
    return [n for n in get_all_nodes(node) if isinstance(n, node_class)]


def find_nodes_by_operator(node: Node, operator: str) -> List[BinaryOpNode]:
    return [n for n in find_nodes_by_type(node, BinaryOpNode) if n.operator == operator]


def get_function_usage_counts(node: Node) -> Counter:
    """Count how often each named function is applied"""
    return Counter(n.name for n in find_nodes_by_type(node, FunctionNode))


def contains_literal_zero_division(node: Node) -> bool:
    """True if some division has a literal 0 divisor as written (before simplification)"""
    for div in find_nodes_by_operator(node, '/'):
        if isinstance(div.right, ConstantNode) and div.right.value == 0.0:
            return True
    return False
