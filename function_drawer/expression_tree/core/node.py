import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, List, Union
from .operators import (
  NodeType, BINARY_OP_MAP, FUNCTION_MAP,
  evaluate_variable, evaluate_constant, apply_binary_op, apply_function
)
from ...errors import UnknownFunctionError

Number = Union[float, np.ndarray]

VARIABLE_TOKEN = 'X'

SYMPY_FUNCTIONS = {
  'sin': sp.sin,
  'cos': sp.cos,
  'tan': sp.tan,
  'abs': sp.Abs,
}


def format_constant(value: float) -> str:
  """Shortest positional decimal that reads back to the same float"""
  if not np.isfinite(value):
    return str(value)
  return np.format_float_positional(value, trim='-')


class Node(ABC):
  """Base node class. Trees are immutable once built, so derived values are cached."""

  __slots__ = ('_hash_cache', '_size_cache', '_depth_cache')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._depth_cache: Optional[int] = None

  @abstractmethod
  def evaluate(self, x: Number) -> Number:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def simplify(self) -> 'Node':
    """Return a new, simplified tree. Raises DivisionByZeroError on a literal zero divisor."""

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def children(self) -> List['Node']:
    pass

  def get_constants(self, constant_list: List[float]):
    for child in self.children():
      child.get_constants(constant_list)

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def depth(self) -> int:
    """Longest root-to-leaf path, leaves have depth 1"""
    if self._depth_cache is None:
      self._depth_cache = 1 + max((child.depth() for child in self.children()), default=0)
    return self._depth_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}<{self.to_string()}>"


class VariableNode(Node):
  __slots__ = ()

  node_type = NodeType.VARIABLE

  def evaluate(self, x: Number) -> Number:
    return evaluate_variable(x)

  def to_string(self) -> str:
    return VARIABLE_TOKEN

  def copy(self) -> 'VariableNode':
    return VariableNode()

  def simplify(self) -> 'VariableNode':
    return VariableNode()

  def children(self) -> List[Node]:
    return []

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE,))

  def to_sympy(self):
    return sp.Symbol(VARIABLE_TOKEN)


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def evaluate(self, x: Number) -> Number:
    return evaluate_constant(x, self.value)

  def to_string(self) -> str:
    return format_constant(self.value)

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def simplify(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def children(self) -> List[Node]:
    return []

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def to_sympy(self):
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def get_constants(self, constant_list):
    constant_list.append(self.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    self.operator = operator
    self.left = left
    self.right = right

  def evaluate(self, x: Number) -> Number:
    left_val = self.left.evaluate(x)
    right_val = self.right.evaluate(x)
    return apply_binary_op(left_val, right_val, self.operator)

  def to_string(self) -> str:
    return f"({self.left.to_string()}{self.operator}{self.right.to_string()})"

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self.operator, self.left.copy(), self.right.copy())

  def simplify(self) -> Node:
    from ..utils.simplifier import ExpressionSimplifier
    left_s = self.left.simplify()
    right_s = self.right.simplify()
    return ExpressionSimplifier.simplify_binary(self.operator, left_s, right_s)

  def children(self) -> List[Node]:
    return [self.left, self.right]

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def to_sympy(self):
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    elif self.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    else:
      return sp.Pow(left, right)


class FunctionNode(Node):
  __slots__ = ('name', 'operand')

  node_type = NodeType.FUNCTION

  def __init__(self, name: str, operand: Node):
    super().__init__()
    if name not in FUNCTION_MAP:
      raise UnknownFunctionError(name)
    self.name = name
    self.operand = operand

  def evaluate(self, x: Number) -> Number:
    return apply_function(self.operand.evaluate(x), self.name)

  def to_string(self) -> str:
    return f"{self.name}({self.operand.to_string()})"

  def copy(self) -> 'FunctionNode':
    return FunctionNode(self.name, self.operand.copy())

  def simplify(self) -> 'FunctionNode':
    # Only the argument is simplified, sin(0) stays sin(0)
    return FunctionNode(self.name, self.operand.simplify())

  def children(self) -> List[Node]:
    return [self.operand]

  def _compute_hash(self) -> int:
    return hash((NodeType.FUNCTION, self.name, hash(self.operand)))

  def to_sympy(self):
    return SYMPY_FUNCTIONS[self.name](self.operand.to_sympy())
