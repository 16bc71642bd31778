import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  # Unary ops
  SIN = 4
  COS = 5

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}
UNARY_OP_MAP = {'sin': OpType.SIN, 'cos': OpType.COS}

OP_SYMBOLS = {op_type: symbol for symbol, op_type in {**BINARY_OP_MAP, **UNARY_OP_MAP}.items()}


def resolve_binary_op(operator) -> OpType:
  """Accept an OpType or its textual symbol and return the binary OpType."""
  if isinstance(operator, OpType):
    if operator not in BINARY_OP_MAP.values():
      raise ValueError(f"Not a binary operator: {operator!r}")
    return operator
  try:
    return BINARY_OP_MAP[operator]
  except (KeyError, TypeError):
    raise ValueError(f"Unknown binary operator: {operator!r}") from None


def resolve_unary_op(operator) -> OpType:
  """Accept an OpType or its function name and return the unary OpType."""
  if isinstance(operator, OpType):
    if operator not in UNARY_OP_MAP.values():
      raise ValueError(f"Not a unary function: {operator!r}")
    return operator
  try:
    return UNARY_OP_MAP[operator]
  except (KeyError, TypeError):
    raise ValueError(f"Unknown unary function: {operator!r}") from None


@numba.njit(cache=True, inline='always')
def evaluate_variable(X):
  return X.astype(np.float64)

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

# Plain IEEE arithmetic, no clipping: x/0 gives inf or nan.
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, operator):
  if operator == '+':
    return left_val + right_val
  elif operator == '-':
    return left_val - right_val
  elif operator == '*':
    return left_val * right_val
  elif operator == '/':
    return np.true_divide(left_val, right_val)
  return np.full_like(left_val, np.nan)

@numba.njit(cache=True)
def evaluate_unary_op(operand_val, operator):
  if operator == 'sin':
    return np.sin(operand_val)
  elif operator == 'cos':
    return np.cos(operand_val)
  return np.full_like(operand_val, np.nan)
