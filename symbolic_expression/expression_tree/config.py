from dataclasses import dataclass
from enum import Enum

from .core.field import NumericField, REAL


class UnboundVariablePolicy(Enum):
  """What evaluation does with a variable missing from the binding table"""
  ZERO = 'zero'    # substitute the field zero
  ERROR = 'error'  # raise UnboundVariable


@dataclass(frozen=True)
class EngineConfig:
  """Settings shared by the operations an Expression runs"""
  field: NumericField = REAL
  on_unbound_variable: UnboundVariablePolicy = UnboundVariablePolicy.ERROR
  simplify_derivatives: bool = False
