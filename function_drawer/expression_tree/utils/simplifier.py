from typing import Callable, Dict
from ..core.node import Node, ConstantNode, BinaryOpNode
from ..core.operators import apply_binary_op
from ...errors import DivisionByZeroError


def _is_constant(node: Node, value: float) -> bool:
  return isinstance(node, ConstantNode) and node.value == value


def _fold(operator: str, left: ConstantNode, right: ConstantNode) -> ConstantNode:
  return ConstantNode(apply_binary_op(left.value, right.value, operator))


class ExpressionSimplifier:
  """Identity tables applied to already-simplified children, one per operator.

  Each rule receives the simplified children and returns the replacement node.
  Rules are checked in order; the first match wins, otherwise the operator node
  is rebuilt from the simplified children.
  """

  @staticmethod
  def simplify_binary(operator: str, left: Node, right: Node) -> Node:
    rule = _RULES[operator]
    return rule(left, right)

  @staticmethod
  def _simplify_sum(left: Node, right: Node) -> Node:
    if _is_constant(left, 0.0):
      return right  # 0 + a = a
    if _is_constant(right, 0.0):
      return left  # a + 0 = a
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return _fold('+', left, right)
    return BinaryOpNode('+', left, right)

  @staticmethod
  def _simplify_prod(left: Node, right: Node) -> Node:
    if _is_constant(left, 1.0):
      return right  # 1 * a = a
    if _is_constant(left, 0.0) or _is_constant(right, 0.0):
      return ConstantNode(0.0)  # 0 * a = 0, a * 0 = 0
    if _is_constant(right, 1.0):
      return left  # a * 1 = a
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return _fold('*', left, right)
    return BinaryOpNode('*', left, right)

  @staticmethod
  def _simplify_dif(left: Node, right: Node) -> Node:
    if _is_constant(left, 0.0):
      return BinaryOpNode('*', right, ConstantNode(-1.0))  # 0 - a = a * -1
    if _is_constant(right, 0.0):
      return left  # a - 0 = a
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return _fold('-', left, right)
    return BinaryOpNode('-', left, right)

  @staticmethod
  def _simplify_div(left: Node, right: Node) -> Node:
    # 0 / a is checked first, so 0 / 0 becomes 0 instead of failing
    if _is_constant(left, 0.0):
      return ConstantNode(0.0)
    if _is_constant(right, 0.0):
      raise DivisionByZeroError(expression=BinaryOpNode('/', left, right).to_string())
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return _fold('/', left, right)
    return BinaryOpNode('/', left, right)

  @staticmethod
  def _simplify_exp(left: Node, right: Node) -> Node:
    if _is_constant(left, 1.0):
      return left  # 1 ^ a collapses to the base
    if _is_constant(right, 1.0):
      return left  # a ^ 1 = a
    if _is_constant(right, 0.0):
      return ConstantNode(1.0)  # a ^ 0 = 1
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return _fold('^', left, right)
    return BinaryOpNode('^', left, right)


_RULES: Dict[str, Callable[[Node, Node], Node]] = {
  '+': ExpressionSimplifier._simplify_sum,
  '*': ExpressionSimplifier._simplify_prod,
  '-': ExpressionSimplifier._simplify_dif,
  '/': ExpressionSimplifier._simplify_div,
  '^': ExpressionSimplifier._simplify_exp,
}
