import numpy as np
from typing import Mapping, Optional

from ..core.node import Node, Constant, Variable, UnaryCall, BinaryOp
from ..core.operators import Operation, Function, evaluate_binary_op, evaluate_unary_op
from ..core.field import NumericField, REAL
from ..config import UnboundVariablePolicy
from ...exceptions import (
  DivisionByZero, UnboundVariable, UnknownOperator, UnknownFunction, InvalidExpression
)
from ...logging_system import log_debug, log_operation


def apply_function(function: Function, value, field: NumericField):
  if function == Function.SIN:
    return field.sin(value)
  elif function == Function.COS:
    return field.cos(value)
  elif function == Function.LN:
    return field.ln(value)
  elif function == Function.EXP:
    return field.exp(value)
  raise UnknownFunction(f"Unknown function: {function!r}")


def apply_operation(op: Operation, left, right, field: NumericField):
  if op == Operation.ADD:
    return field.add(left, right)
  elif op == Operation.SUB:
    return field.sub(left, right)
  elif op == Operation.MUL:
    return field.mul(left, right)
  elif op == Operation.DIV:
    return field.div(left, right)
  elif op == Operation.POW:
    return field.pow(left, right)
  raise UnknownOperator(f"Unknown operation: {op!r}")


def evaluate(node: Node, bindings: Optional[Mapping[str, object]] = None,
             field: NumericField = REAL,
             on_unbound_variable: UnboundVariablePolicy = UnboundVariablePolicy.ERROR):
  """Evaluate a tree against variable bindings.

  Args:
      node: Root of the tree
      bindings: Variable name -> value; values are coerced into the field
      field: Numeric field the arithmetic runs in
      on_unbound_variable: ERROR raises UnboundVariable for a missing name,
          ZERO substitutes the field zero

  Returns:
      A scalar of the field's dtype
  """
  if bindings is None:
    bindings = {}
  return _evaluate(node, bindings, field, on_unbound_variable)


def _evaluate(node, bindings, field, policy):
  if isinstance(node, Constant):
    return field.coerce(node.value)

  elif isinstance(node, Variable):
    if node.name in bindings:
      return field.coerce(bindings[node.name])
    if policy is UnboundVariablePolicy.ZERO:
      log_debug(f"unbound variable '{node.name}' evaluated as zero")
      return field.zero()
    raise UnboundVariable(node.name)

  elif isinstance(node, UnaryCall):
    operand = _evaluate(node.operand, bindings, field, policy)
    return apply_function(node.function, operand, field)

  elif isinstance(node, BinaryOp):
    left = _evaluate(node.left, bindings, field, policy)
    right = _evaluate(node.right, bindings, field, policy)
    return apply_operation(node.op, left, right, field)

  raise InvalidExpression(f"Cannot evaluate object of type {type(node).__name__}")


def evaluate_batch(node: Node, columns: Mapping[str, object],
                   field: NumericField = REAL,
                   on_unbound_variable: UnboundVariablePolicy = UnboundVariablePolicy.ERROR,
                   n_samples: Optional[int] = None) -> np.ndarray:
  """Evaluate a tree over equal-length columns of variable values.

  Operators run through the compiled kernels in core.operators. A divisor
  column holding any zero raises DivisionByZero for the whole batch.
  """
  arrays = {name: np.atleast_1d(np.asarray(values, dtype=field.dtype)) for name, values in columns.items()}
  lengths = {arr.shape[0] for arr in arrays.values()}
  if len(lengths) > 1:
    raise ValueError(f"Columns have different lengths: {sorted(lengths)}")
  if n_samples is None:
    n_samples = lengths.pop() if lengths else 1
  elif lengths and n_samples not in lengths:
    raise ValueError(f"n_samples={n_samples} does not match column length {lengths.pop()}")

  log_operation('evaluate_batch', f"{n_samples} samples over {sorted(arrays)}")
  return _evaluate_batch(node, arrays, field, on_unbound_variable, n_samples)


def _evaluate_batch(node, arrays, field, policy, n_samples):
  if isinstance(node, Constant):
    return np.full(n_samples, field.coerce(node.value), dtype=field.dtype)

  elif isinstance(node, Variable):
    if node.name in arrays:
      return arrays[node.name].copy()
    if policy is UnboundVariablePolicy.ZERO:
      return np.zeros(n_samples, dtype=field.dtype)
    raise UnboundVariable(node.name)

  elif isinstance(node, UnaryCall):
    if not isinstance(node.function, Function):
      raise UnknownFunction(f"Unknown function: {node.function!r}")
    operand = _evaluate_batch(node.operand, arrays, field, policy, n_samples)
    return evaluate_unary_op(operand, int(node.function))

  elif isinstance(node, BinaryOp):
    if not isinstance(node.op, Operation):
      raise UnknownOperator(f"Unknown operation: {node.op!r}")
    left = _evaluate_batch(node.left, arrays, field, policy, n_samples)
    right = _evaluate_batch(node.right, arrays, field, policy, n_samples)
    if node.op == Operation.DIV and np.any(right == 0):
      raise DivisionByZero(f"Divisor is zero at rows {np.flatnonzero(right == 0).tolist()}")
    if node.op == Operation.POW and np.any((left == 0) & (right.real < 0)):
      raise DivisionByZero("Zero raised to a negative power")
    return evaluate_binary_op(left, right, int(node.op))

  raise InvalidExpression(f"Cannot evaluate object of type {type(node).__name__}")
