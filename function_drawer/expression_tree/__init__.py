"""Expression Tree Module

Immutable single-variable expression trees with evaluation, printing and simplification.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    FunctionNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    FUNCTION_MAP,
    apply_binary_op,
    apply_function
)
from .utils import ExpressionSimplifier, calculate_tree_depth, contains_literal_zero_division

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "FunctionNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "FUNCTION_MAP",
    "apply_binary_op", "apply_function",
    "ExpressionSimplifier", "calculate_tree_depth", "contains_literal_zero_division"
]
