import numpy as np
import pytest

from symbolic_expression import REAL, COMPLEX, field_for_name
from symbolic_expression.exceptions import DivisionByZero, UnsupportedOperation


def test_real_arithmetic_returns_float64():
    result = REAL.add(2, 3)
    assert result == 5.0
    assert isinstance(result, np.float64)
    assert REAL.sub(2, 3) == -1.0
    assert REAL.mul(2, 3) == 6.0
    assert REAL.div(3, 2) == 1.5
    assert REAL.pow(2, 10) == 1024.0


def test_zero_and_one():
    assert REAL.zero() == 0.0
    assert REAL.one() == 1.0
    assert COMPLEX.zero() == 0j
    assert COMPLEX.one() == 1 + 0j
    assert isinstance(COMPLEX.one(), np.complex128)


def test_division_by_zero_is_reported():
    with pytest.raises(DivisionByZero):
        REAL.div(1, 0)
    with pytest.raises(ZeroDivisionError):
        COMPLEX.div(1j, 0)


def test_zero_to_negative_power_is_division_by_zero():
    with pytest.raises(DivisionByZero):
        REAL.pow(0, -1)
    with pytest.raises(DivisionByZero):
        COMPLEX.pow(0, -2 + 1j)
    assert REAL.pow(0, 0) == 1.0


def test_equality_is_exact():
    assert not REAL.eq(0.1 + 0.2, 0.3)
    assert REAL.eq(0.5, 0.5)
    assert REAL.is_zero(-0.0)
    assert COMPLEX.is_one(1)


def test_abs():
    assert REAL.abs(-2.5) == 2.5
    assert COMPLEX.abs(3 + 4j) == 5


def test_complex_arithmetic():
    assert COMPLEX.mul(1j, 1j) == -1
    assert COMPLEX.add(1 + 2j, 3 - 4j) == 4 - 2j


def test_complex_field_is_unordered():
    with pytest.raises(UnsupportedOperation):
        COMPLEX.greater_than(1, 0)
    assert REAL.greater_than(2, 1)


def test_capabilities():
    assert REAL.supports_power_derivative
    assert not COMPLEX.supports_power_derivative


def test_field_for_name():
    assert field_for_name('real') is REAL
    assert field_for_name('Complex') is COMPLEX
    with pytest.raises(ValueError):
        field_for_name('quaternion')
