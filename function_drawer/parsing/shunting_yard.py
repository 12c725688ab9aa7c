"""
Infix to postfix (RPN) conversion with the shunting-yard algorithm.

Supported input: decimal literals, the variable X, the binary operators
+ - * / ^, parentheses and function calls written name(expr). There is no
unary minus and no implicit multiplication.
"""

import string
from typing import List, Optional

from ..errors import TokenizeError, ERROR_MESSAGES
from ..expression_tree.core.node import VARIABLE_TOKEN
from ..logging_system import log_detail

TOKEN_DELIMITER = ' '

NUMBER_CHARS = frozenset(string.digits + '.')
NAME_CHARS = frozenset(string.ascii_letters) - {VARIABLE_TOKEN}
OPERATORS = frozenset('+-*/^')

# Stack-top operators popped to the output before pushing the key operator.
# '^' flushes nothing, so chains of it associate to the right.
FLUSHED_BY = {
  '+': frozenset('+-*/^'),
  '-': frozenset('+-*/^'),
  '*': frozenset('*/^'),
  '/': frozenset('*/^'),
  '^': frozenset(),
}


def is_function_token(token: str) -> bool:
  return token.isalpha() and token != VARIABLE_TOKEN


class ShuntingYardConverter:
  """Single-use converter; holds the operator stack and output for one input string."""

  def __init__(self, expression: str):
    self.expression = expression
    self.output: List[str] = []
    self.op_stack: List[str] = []
    self._number: Optional[str] = None
    self._name: str = ''

  def _error(self, code: str, detail: str = '') -> TokenizeError:
    return TokenizeError(ERROR_MESSAGES[code] + detail, code=code, expression=self.expression)

  def _end_number(self):
    if self._number is None:
      return
    token = self._number
    self._number = None
    try:
      float(token)
    except ValueError:
      raise self._error("1004", token) from None
    self.output.append(token)

  def _reject_pending_name(self):
    if self._name:
      raise self._error("1005", self._name)

  def _push_operator(self, operator: str):
    flushed = FLUSHED_BY[operator]
    while self.op_stack and self.op_stack[-1] in flushed:
      self.output.append(self.op_stack.pop())
    self.op_stack.append(operator)

  def _open_paren(self):
    if self._name:
      # the function name sits beneath its '(' marker
      self.op_stack.append(self._name)
      self._name = ''
    self.op_stack.append('(')

  def _close_paren(self):
    self._reject_pending_name()
    while self.op_stack and self.op_stack[-1] != '(':
      self.output.append(self.op_stack.pop())
    if not self.op_stack:
      raise self._error("1002")
    self.op_stack.pop()
    if self.op_stack and is_function_token(self.op_stack[-1]):
      self.output.append(self.op_stack.pop())

  def convert(self) -> List[str]:
    for char in self.expression:
      if char in NUMBER_CHARS:
        self._reject_pending_name()
        self._number = char if self._number is None else self._number + char
        continue

      self._end_number()

      if char.isspace():
        continue
      elif char in OPERATORS:
        self._reject_pending_name()
        self._push_operator(char)
      elif char == '(':
        self._open_paren()
      elif char == ')':
        self._close_paren()
      elif char == VARIABLE_TOKEN:
        self._reject_pending_name()
        self.output.append(VARIABLE_TOKEN)
      elif char in NAME_CHARS:
        self._name += char
      else:
        raise self._error("1001", repr(char))

    self._end_number()
    self._reject_pending_name()
    while self.op_stack:
      token = self.op_stack.pop()
      if token == '(':
        raise self._error("1003")
      self.output.append(token)

    log_detail(f"postfix of '{self.expression}': {TOKEN_DELIMITER.join(self.output)}")
    return self.output


def to_postfix(expression: str) -> List[str]:
  """Convert an infix expression to a list of postfix tokens."""
  return ShuntingYardConverter(expression).convert()


def to_rpn_string(expression: str) -> str:
  """Postfix tokens joined by the token delimiter, e.g. '2+3*X' -> '2 3 X * +'."""
  return TOKEN_DELIMITER.join(to_postfix(expression))
