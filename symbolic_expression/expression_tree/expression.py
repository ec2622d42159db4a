import numpy as np
import sympy as sp
from typing import FrozenSet, Mapping, Optional

from .core.node import Node, as_node
from .config import EngineConfig, UnboundVariablePolicy
from .operations import evaluate, evaluate_batch, differentiate, render, simplify
from .utils import to_sympy, latex_representation
from ..logging_system import log_info


class Expression:
  """A tree bundled with the configuration its operations run under"""

  __slots__ = ('root', 'config', '_string_cache')

  def __init__(self, root, config: Optional[EngineConfig] = None):
    self.root: Node = as_node(root)
    self.config = config if config is not None else EngineConfig()
    self._string_cache: Optional[str] = None
    if self.config.on_unbound_variable is UnboundVariablePolicy.ZERO:
      log_info("unbound variables will evaluate to zero")

  @property
  def field(self):
    return self.config.field

  def evaluate(self, bindings: Optional[Mapping[str, object]] = None):
    return evaluate(self.root, bindings, self.field, self.config.on_unbound_variable)

  def evaluate_batch(self, columns: Mapping[str, object], n_samples: Optional[int] = None) -> np.ndarray:
    return evaluate_batch(self.root, columns, self.field, self.config.on_unbound_variable, n_samples)

  def diff(self, variable: str) -> 'Expression':
    derivative = differentiate(self.root, variable, self.field, stacklevel=2)
    if self.config.simplify_derivatives:
      derivative = simplify(derivative, self.field)
    return Expression(derivative, self.config)

  def simplify(self) -> 'Expression':
    return Expression(simplify(self.root, self.field), self.config)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = render(self.root)
    return self._string_cache

  def to_sympy(self) -> sp.Expr:
    return to_sympy(self.root)

  def to_latex(self) -> str:
    return latex_representation(self.root)

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def free_variables(self) -> FrozenSet[str]:
    return self.root.free_variables()

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
