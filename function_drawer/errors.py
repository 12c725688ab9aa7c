"""Error types raised while tokenizing, building and simplifying expressions.

Error codes are structured as:
  1. digit: stage (1 tokenizer, 2 function registry, 3 tree builder, 4 simplifier)
  2.-4. digit: error number
"""

from typing import Optional


ERROR_MESSAGES = {
  "1001": "Invalid character: ",  # + character
  "1002": "Missing '(' for ')'.",
  "1003": "Missing ')'.",
  "1004": "Invalid number: ",  # + token
  "1005": "Function name is not followed by '(': ",  # + name

  "2001": "Unknown function: ",  # + name

  "3001": "Not enough operands for: ",  # + token
  "3002": "Expression does not reduce to a single tree.",
  "3003": "Unexpected token: ",  # + token
  "3004": "Expression nesting too deep: ",  # + depth

  "4001": "Division by zero.",
}


class ExpressionError(Exception):
  def __init__(self, message: str, code: str = "9999", expression: Optional[str] = None):
    super().__init__(message)
    self.message = message
    self.code = code
    self.expression = expression

  def __str__(self) -> str:
    if self.expression:
      return f"{self.message} (in '{self.expression}')"
    return self.message


class TokenizeError(ExpressionError):
  """Malformed infix text."""


class UnknownFunctionError(ExpressionError):
  def __init__(self, name: str, expression: Optional[str] = None):
    super().__init__(ERROR_MESSAGES["2001"] + name, code="2001", expression=expression)
    self.name = name


class MalformedRPNError(ExpressionError):
  """Postfix stream that does not reduce to exactly one tree."""


class ExpressionDepthError(MalformedRPNError):
  def __init__(self, depth: int, max_depth: int, expression: Optional[str] = None):
    super().__init__(f"{ERROR_MESSAGES['3004']}{depth} > {max_depth}", code="3004",
                     expression=expression)
    self.depth = depth
    self.max_depth = max_depth


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
  def __init__(self, expression: Optional[str] = None):
    super().__init__(ERROR_MESSAGES["4001"], code="4001", expression=expression)
