import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  UNARY_CALL = 2
  BINARY_OP = 3

class Operation(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4

class Function(IntEnum):
  SIN = 0
  COS = 1
  LN = 2
  EXP = 3

OPERATION_SYMBOLS = {
  Operation.ADD: '+', Operation.SUB: '-', Operation.MUL: '*',
  Operation.DIV: '/', Operation.POW: '^'
}
FUNCTION_NAMES = {Function.SIN: 'sin', Function.COS: 'cos', Function.LN: 'ln', Function.EXP: 'exp'}

# Reverse lookups
BINARY_OP_MAP = {symbol: op for op, symbol in OPERATION_SYMBOLS.items()}
UNARY_OP_MAP = {name: func for func, name in FUNCTION_NAMES.items()}

@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, op_code):
  # Divisor columns are checked for zeros before reaching this kernel
  if op_code == 0:
    return left_val + right_val
  elif op_code == 1:
    return left_val - right_val
  elif op_code == 2:
    return left_val * right_val
  elif op_code == 3:
    return left_val / right_val
  elif op_code == 4:
    return np.power(left_val, right_val)
  return np.zeros_like(left_val)

@numba.njit(cache=True)
def evaluate_unary_op(operand_val, op_code):
  if op_code == 0:
    return np.sin(operand_val)
  elif op_code == 1:
    return np.cos(operand_val)
  elif op_code == 2:
    return np.log(operand_val)
  elif op_code == 3:
    return np.exp(operand_val)
  return np.zeros_like(operand_val)
