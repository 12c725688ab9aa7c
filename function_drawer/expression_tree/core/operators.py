import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  FUNCTION = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Functions
  SIN = 5
  COS = 6
  TAN = 7
  ABS = 8

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
FUNCTION_MAP = {'sin': OpType.SIN, 'cos': OpType.COS, 'tan': OpType.TAN, 'abs': OpType.ABS}


def evaluate_variable(x):
  if isinstance(x, np.ndarray):
    return x.astype(np.float64)
  return float(x)


def evaluate_constant(x, value):
  if isinstance(x, np.ndarray):
    return np.full(x.shape, value, dtype=np.float64)
  return value


# error_model='numpy' keeps IEEE-754 results (inf/nan) instead of raising
# ZeroDivisionError on scalar division.
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return np.power(left_val, right_val)
  raise ValueError("unknown binary operator")


@numba.njit(cache=True, error_model='numpy')
def evaluate_function_op(operand_val, op_type):
  if op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  elif op_type == OpType.TAN:
    return np.tan(operand_val)
  elif op_type == OpType.ABS:
    return np.abs(operand_val)
  raise ValueError("unknown function")


def apply_binary_op(left_val, right_val, operator: str):
  """Apply `operator` to scalars or arrays with IEEE-754 semantics."""
  with np.errstate(all='ignore'):
    return evaluate_binary_op(left_val, right_val, int(BINARY_OP_MAP[operator]))


def apply_function(operand_val, name: str):
  with np.errstate(all='ignore'):
    return evaluate_function_op(operand_val, int(FUNCTION_MAP[name]))
