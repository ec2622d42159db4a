import numbers
from abc import ABC
from dataclasses import dataclass
from typing import Any, FrozenSet, Tuple, Union
from .operators import NodeType, Operation, Function


class Node(ABC):
  """Base class of the four expression variants.

  Nodes are frozen: every transformation builds new nodes, so a subtree can
  be shared by several parents (the original expression and its derivative,
  for instance) without one operation corrupting the other.
  """

  node_type: NodeType

  def children(self) -> Tuple['Node', ...]:
    return ()

  def size(self) -> int:
    """Node count, counting shared subtrees once per reference"""
    return 1 + sum(child.size() for child in self.children())

  def depth(self) -> int:
    """Longest root-to-leaf path; leaves have depth 1"""
    return 1 + max((child.depth() for child in self.children()), default=0)

  def free_variables(self) -> FrozenSet[str]:
    names: FrozenSet[str] = frozenset()
    for child in self.children():
      names = names | child.free_variables()
    return names

  def is_closed(self) -> bool:
    """True when the subtree contains no variables"""
    return not self.free_variables()

  def __add__(self, other):
    return _binary(Operation.ADD, self, other)

  def __radd__(self, other):
    return _binary(Operation.ADD, other, self)

  def __sub__(self, other):
    return _binary(Operation.SUB, self, other)

  def __rsub__(self, other):
    return _binary(Operation.SUB, other, self)

  def __mul__(self, other):
    return _binary(Operation.MUL, self, other)

  def __rmul__(self, other):
    return _binary(Operation.MUL, other, self)

  def __truediv__(self, other):
    return _binary(Operation.DIV, self, other)

  def __rtruediv__(self, other):
    return _binary(Operation.DIV, other, self)

  def __pow__(self, other):
    return _binary(Operation.POW, self, other)

  def __rpow__(self, other):
    return _binary(Operation.POW, other, self)

  def __neg__(self):
    # No negation variant: -x is (-1) * x
    return BinaryOp(Operation.MUL, Constant(-1), self)


@dataclass(frozen=True, repr=False)
class Constant(Node):
  value: Any
  node_type = NodeType.CONSTANT

  def free_variables(self) -> FrozenSet[str]:
    return frozenset()

  def __repr__(self) -> str:
    return f"Constant({self.value!r})"


@dataclass(frozen=True, repr=False)
class Variable(Node):
  name: str
  node_type = NodeType.VARIABLE

  def free_variables(self) -> FrozenSet[str]:
    return frozenset((self.name,))

  def __repr__(self) -> str:
    return f"Variable({self.name!r})"


@dataclass(frozen=True, repr=False)
class UnaryCall(Node):
  function: Function
  operand: Node
  node_type = NodeType.UNARY_CALL

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def __repr__(self) -> str:
    return f"UnaryCall({self.function.name}, {self.operand!r})"


@dataclass(frozen=True, repr=False)
class BinaryOp(Node):
  op: Operation
  left: Node
  right: Node
  node_type = NodeType.BINARY_OP

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def __repr__(self) -> str:
    return f"BinaryOp({self.op.name}, {self.left!r}, {self.right!r})"


NodeLike = Union[Node, numbers.Number]


def as_node(value: NodeLike) -> Node:
  """Wrap plain numbers as constants; nodes pass through"""
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Number):
    return Constant(value)
  raise TypeError(f"Cannot use {type(value).__name__} as an expression")


def _binary(op: Operation, left, right):
  if not isinstance(left, (Node, numbers.Number)) or not isinstance(right, (Node, numbers.Number)):
    return NotImplemented
  return BinaryOp(op, as_node(left), as_node(right))


# Builders for programmatic construction
def const(value) -> Constant:
  return Constant(value)

def var(name: str) -> Variable:
  return Variable(name)

def sin(operand: NodeLike) -> UnaryCall:
  return UnaryCall(Function.SIN, as_node(operand))

def cos(operand: NodeLike) -> UnaryCall:
  return UnaryCall(Function.COS, as_node(operand))

def ln(operand: NodeLike) -> UnaryCall:
  return UnaryCall(Function.LN, as_node(operand))

def exp(operand: NodeLike) -> UnaryCall:
  return UnaryCall(Function.EXP, as_node(operand))
