"""
Postfix (RPN) to expression tree.

Normal RPN evaluation, except that no arithmetic is done: every token turns
into a node that is pushed on an operand stack.
"""

import re
from typing import List, Optional, Sequence, Union

from ..errors import MalformedRPNError, ExpressionDepthError, UnknownFunctionError, ERROR_MESSAGES
from ..config import DEFAULT_MAX_DEPTH, validate_max_depth
from ..expression_tree.core.node import Node, ConstantNode, VariableNode, BinaryOpNode, FunctionNode, VARIABLE_TOKEN
from ..expression_tree.core.operators import BINARY_OP_MAP, FUNCTION_MAP
from ..logging_system import LogLevel, get_logger, log_detail
from .shunting_yard import TOKEN_DELIMITER, is_function_token

NUMBER_PATTERN = re.compile(r'^(\d+\.?\d*|\.\d+)$')


class RPNTreeBuilder:
  """Builds trees from postfix token streams, refusing trees deeper than `max_depth`."""

  def __init__(self, max_depth: Optional[int] = None):
    self.max_depth = DEFAULT_MAX_DEPTH if max_depth is None else validate_max_depth(max_depth)

  def build(self, tokens: Union[str, Sequence[str]]) -> Node:
    if isinstance(tokens, str):
      tokens = tokens.split(TOKEN_DELIMITER)
    tokens = [token for token in tokens if token]
    source = TOKEN_DELIMITER.join(tokens)

    stack: List[Node] = []

    def pop_operand(token: str) -> Node:
      if not stack:
        raise MalformedRPNError(ERROR_MESSAGES["3001"] + token, code="3001", expression=source)
      return stack.pop()

    for token in tokens:
      if NUMBER_PATTERN.match(token):
        node = ConstantNode(float(token))
      elif token == VARIABLE_TOKEN:
        node = VariableNode()
      elif token in BINARY_OP_MAP:
        rhs = pop_operand(token)
        lhs = pop_operand(token)
        node = BinaryOpNode(token, lhs, rhs)
      elif is_function_token(token):
        if token not in FUNCTION_MAP:
          raise UnknownFunctionError(token, expression=source)
        node = FunctionNode(token, pop_operand(token))
      else:
        raise MalformedRPNError(ERROR_MESSAGES["3003"] + repr(token), code="3003", expression=source)

      # children's depths are already cached, so this is O(1) per token
      if node.depth() > self.max_depth:
        raise ExpressionDepthError(node.depth(), self.max_depth, expression=source)
      stack.append(node)

    if len(stack) != 1:
      raise MalformedRPNError(f"{ERROR_MESSAGES['3002']} ({len(stack)} operands left)",
                              code="3002", expression=source)

    root = stack[0]
    if get_logger()._should_log(LogLevel.DETAILED):
      log_detail(f"built tree {root.to_string()} ({root.size()} nodes, depth {root.depth()})")
    return root


def build_tree(tokens: Union[str, Sequence[str]], max_depth: Optional[int] = None) -> Node:
  """Build an expression tree from postfix tokens (a list, or a delimiter-separated string)."""
  return RPNTreeBuilder(max_depth).build(tokens)
