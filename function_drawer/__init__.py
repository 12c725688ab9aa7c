"""Function Drawer Package

Parses single-variable infix formulas into expression trees that can be
evaluated, printed and algebraically simplified.
"""

from typing import Optional

from .errors import (
  ExpressionError, TokenizeError, UnknownFunctionError,
  MalformedRPNError, ExpressionDepthError, DivisionByZeroError
)
from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode,
  BinaryOpNode, FunctionNode
)
from .parsing import to_postfix, to_rpn_string, build_tree, RPNTreeBuilder, ShuntingYardConverter
from .config import DrawerConfig, load_config, save_config
from .sampling import sample_function, to_screen_coordinates, draw_function


def parse_expression(text: str, simplify: bool = False,
                     config: Optional[DrawerConfig] = None) -> Expression:
  """Tokenize, build and optionally simplify `text` into an Expression."""
  max_depth = config.max_depth if config is not None else None
  expression = Expression(build_tree(to_postfix(text), max_depth=max_depth))
  if simplify:
    expression = expression.simplify()
  return expression


parse = parse_expression

__version__ = "0.1.0"
__all__ = [
  "ExpressionError", "TokenizeError", "UnknownFunctionError",
  "MalformedRPNError", "ExpressionDepthError", "DivisionByZeroError",
  "Expression", "Node", "VariableNode", "ConstantNode",
  "BinaryOpNode", "FunctionNode",
  "to_postfix", "to_rpn_string", "build_tree", "RPNTreeBuilder", "ShuntingYardConverter",
  "DrawerConfig", "load_config", "save_config",
  "sample_function", "to_screen_coordinates", "draw_function",
  "parse_expression", "parse"
]
