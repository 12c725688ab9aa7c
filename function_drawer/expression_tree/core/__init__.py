"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, FunctionNode, format_constant
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, FUNCTION_MAP,
    evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_function_op,
    apply_binary_op, apply_function
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'FunctionNode', 'format_constant',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'FUNCTION_MAP',
    'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op', 'evaluate_function_op',
    'apply_binary_op', 'apply_function'
]
