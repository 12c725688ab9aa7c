"""Infix parsing: shunting-yard conversion and RPN tree building."""

from .shunting_yard import ShuntingYardConverter, to_postfix, to_rpn_string, TOKEN_DELIMITER
from .rpn_builder import RPNTreeBuilder, build_tree

__all__ = [
    'ShuntingYardConverter', 'to_postfix', 'to_rpn_string', 'TOKEN_DELIMITER',
    'RPNTreeBuilder', 'build_tree'
]
