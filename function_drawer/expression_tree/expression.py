import numpy as np
import sympy as sp
from typing import Optional, Union
from .core.node import Node
from ..logging_system import log_debug


class Expression:
  """Owner of one expression tree. Evaluation and printing never modify it."""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Value at `x`; arrays are evaluated element-wise in one pass.

    Division by a runtime zero or a negative base to a fractional power yield
    inf/nan rather than raising.
    """
    return self.root.evaluate(x)

  def __call__(self, x):
    return self.evaluate(x)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def simplify(self) -> 'Expression':
    simplified = Expression(self.root.simplify())
    log_debug(f"simplified {self.to_string()} -> {simplified.to_string()} "
              f"({self.size()} -> {simplified.size()} nodes)")
    return simplified

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def get_constants(self) -> tuple:
    const_list = []
    self.root.get_constants(const_list)
    return tuple(const_list)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"

  def __hash__(self) -> int:
    return hash(self.to_string())

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.to_string() == other.to_string()
