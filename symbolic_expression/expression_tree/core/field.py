import numpy as np
from abc import ABC, abstractmethod
from typing import Any, Dict

from ...exceptions import DivisionByZero, UnsupportedOperation


class NumericField(ABC):
  """Minimal field-like arithmetic over one numpy scalar type.

  Every tree operation is generic over a field instance. Equality is exact,
  matching the exact identities the simplifier looks for.
  """

  name: str = ''
  dtype: Any = None
  ordered: bool = False
  supports_power_derivative: bool = False

  def coerce(self, value):
    return self.dtype(value)

  def zero(self):
    return self.dtype(0)

  def one(self):
    return self.dtype(1)

  def add(self, a, b):
    return self.coerce(a) + self.coerce(b)

  def sub(self, a, b):
    return self.coerce(a) - self.coerce(b)

  def mul(self, a, b):
    return self.coerce(a) * self.coerce(b)

  def div(self, a, b):
    b = self.coerce(b)
    if self.is_zero(b):
      raise DivisionByZero(f"Division of {a} by zero in the {self.name} field")
    return self.coerce(a) / b

  def pow(self, a, b):
    a, b = self.coerce(a), self.coerce(b)
    if self.is_zero(a) and self._is_negative(b):
      raise DivisionByZero(f"Zero raised to negative power {b} in the {self.name} field")
    return np.power(a, b)

  def abs(self, a):
    return self.coerce(np.abs(self.coerce(a)))

  def eq(self, a, b) -> bool:
    return bool(self.coerce(a) == self.coerce(b))

  def is_zero(self, a) -> bool:
    return self.eq(a, self.zero())

  def is_one(self, a) -> bool:
    return self.eq(a, self.one())

  def greater_than(self, a, b) -> bool:
    if not self.ordered:
      raise UnsupportedOperation(f"The {self.name} field has no ordering")
    return bool(self.coerce(a) > self.coerce(b))

  def sin(self, a):
    return np.sin(self.coerce(a))

  def cos(self, a):
    return np.cos(self.coerce(a))

  def ln(self, a):
    return np.log(self.coerce(a))

  def exp(self, a):
    return np.exp(self.coerce(a))

  @abstractmethod
  def _is_negative(self, a) -> bool:
    pass

  def __repr__(self) -> str:
    return f"{type(self).__name__}()"


class RealField(NumericField):
  name = 'real'
  dtype = np.float64
  ordered = True
  supports_power_derivative = True

  def _is_negative(self, a) -> bool:
    return bool(a < 0)


class ComplexField(NumericField):
  name = 'complex'
  dtype = np.complex128

  def _is_negative(self, a) -> bool:
    # 0 ** z is undefined whenever Re(z) < 0
    return bool(a.real < 0)


REAL = RealField()
COMPLEX = ComplexField()

FIELDS: Dict[str, NumericField] = {REAL.name: REAL, COMPLEX.name: COMPLEX}


def field_for_name(name: str) -> NumericField:
  try:
    return FIELDS[name.lower()]
  except KeyError:
    raise ValueError(f"Unknown numeric field '{name}', expected one of {sorted(FIELDS)}") from None
