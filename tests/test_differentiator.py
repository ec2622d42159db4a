import random
import warnings

import numpy as np
import pytest
import sympy as sp

from symbolic_expression import (
    Constant, Variable, UnaryCall, BinaryOp, Operation, Function,
    REAL, COMPLEX, DerivativeApproximationWarning, Expression, EngineConfig,
    differentiate, nth_derivative, evaluate, render, simplify, to_sympy,
    var, sin, cos, ln, exp
)
from symbolic_expression.exceptions import UnknownOperator, UnsupportedOperation

x = var("x")
y = var("y")


def finite_difference(e, env, name, h=1e-6):
    shifted = dict(env)
    shifted[name] = env[name] + h
    return (evaluate(e, shifted) - evaluate(e, env)) / h


@pytest.mark.parametrize("value", [0, 1, -3.5, 42])
def test_constant_derivative_is_zero(value):
    assert differentiate(Constant(value), "x") == Constant(0)


def test_variable_derivatives():
    assert differentiate(Variable("x"), "x") == Constant(1)
    assert differentiate(Variable("y"), "x") == Constant(0)


def test_sin_scenario():
    d = differentiate(UnaryCall(Function.SIN, Variable("x")), "x")
    assert render(d) == "(cos(x) * 1)"
    assert render(simplify(d)) == "cos(x)"


def test_unary_chain_rules():
    assert render(differentiate(cos(x), "x")) == "(((-1) * sin(x)) * 1)"
    assert render(differentiate(ln(x), "x")) == "(1 / x)"
    assert render(differentiate(exp(x), "x")) == "(exp(x) * 1)"
    assert render(differentiate(sin(x * x), "x")) == "(cos(x * x) * ((1 * x) + (x * 1)))"


def test_sum_difference_product_quotient_shapes():
    assert render(differentiate(x + y, "x")) == "(1 + 0)"
    assert render(differentiate(x - y, "x")) == "(1 - 0)"
    assert render(differentiate(x * y, "x")) == "((1 * y) + (x * 0))"
    assert render(differentiate(x / y, "x")) == "(((1 * y) - (x * 0)) / (y ^ 2))"


def test_power_rule_for_exponent_above_one():
    d = differentiate(x ** 3, "x")
    assert render(d) == "(3 * ((x ^ 2) * 1))"
    assert evaluate(d, {"x": 2}) == 12


def test_power_with_exponent_one_returns_one():
    assert differentiate(x ** 1, "x") == Constant(1)
    with pytest.warns(DerivativeApproximationWarning):
        assert differentiate(sin(x) ** 1, "x") == Constant(1)


def test_negative_exponent_rule_is_exact():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DerivativeApproximationWarning)
        d = differentiate(x ** -1, "x")
        d2 = differentiate(x ** -2, "x")
    assert render(d) == "(((-1) * 1) / (x ^ 2))"
    assert evaluate(d, {"x": 2}) == -0.25
    assert evaluate(d2, {"x": 2}) == pytest.approx(-2 / 8)


def test_fractional_exponent_rule_is_preserved_and_flagged():
    # Known defect kept for compatibility: d/dx x^0.5 should be 0.5 / x^0.5
    with pytest.warns(DerivativeApproximationWarning):
        d = differentiate(x ** 0.5, "x")
    assert render(d) == "((0.500000 * 1) / (x ^ 1.500000))"
    assert evaluate(d, {"x": 4}) == pytest.approx(0.5 / 8)
    assert evaluate(d, {"x": 4}) != pytest.approx(0.25)


def test_exponential_rule():
    d = differentiate(2 ** x, "x")
    assert render(d) == "(1 * ((2 ^ x) * ln(2)))"
    assert evaluate(d, {"x": 3}) == pytest.approx(8 * np.log(2))


def test_general_power_rule_is_preserved_and_flagged():
    # Known defect kept for compatibility: this is d/dx (g * ln f), not d/dx f^g
    with pytest.warns(DerivativeApproximationWarning):
        d = differentiate(x ** x, "x")
    assert render(d) == "((1 * ln(x)) + (x * (1 / x)))"
    assert evaluate(d, {"x": 2}) == pytest.approx(np.log(2) + 1)


@pytest.mark.parametrize("call", [
    lambda: differentiate(x ** x, "x"),
    lambda: nth_derivative(x ** x, "x", 1),
    lambda: Expression(x ** x, EngineConfig()).diff("x"),
])
def test_approximation_warning_points_at_the_caller(call):
    with pytest.warns(DerivativeApproximationWarning) as record:
        call()
    assert record[0].filename == __file__


def test_power_is_unsupported_in_complex_field():
    with pytest.raises(UnsupportedOperation):
        differentiate(x ** 2, "x", COMPLEX)
    with pytest.raises(UnsupportedOperation):
        differentiate(sin(x) + cos(x ** y), "x", COMPLEX)


def test_complex_field_differentiates_without_powers():
    d = differentiate(sin(x) * x, "x", COMPLEX)
    assert render(d) == "(((cos(x) * 1) * x) + (sin(x) * 1))"
    assert evaluate(d, {"x": 1j}, COMPLEX) == pytest.approx(np.cos(1j) * 1j + np.sin(1j))


def test_sum_rule_numerically():
    f = sin(x) * x
    g = exp(x) / (x + 2)
    rng = random.Random(7)
    for _ in range(10):
        env = {"x": rng.uniform(-1.0, 1.0)}
        combined = evaluate(differentiate(f + g, "x"), env)
        separate = evaluate(differentiate(f, "x"), env) + evaluate(differentiate(g, "x"), env)
        assert combined == pytest.approx(separate)


@pytest.mark.parametrize("e", [
    x ** 3,
    sin(x) * x,
    exp(x) / x,
    ln(x) * cos(x),
    x ** -2,
    3 ** sin(x),
    cos(x * y) - y / x,
])
def test_derivative_matches_finite_difference(e):
    env = {"x": 1.3, "y": 0.7}
    derivative = evaluate(differentiate(e, "x"), env)
    assert derivative == pytest.approx(finite_difference(e, env, "x"), rel=1e-4, abs=1e-4)


@pytest.mark.parametrize("e", [
    x ** 3 + 2 * x,
    sin(x) * cos(x),
    exp(x * x) / (x + 1),
    ln(sin(x)),
    2 ** x,
])
def test_derivative_matches_sympy(e):
    X = sp.Symbol("x")
    ours = to_sympy(differentiate(e, "x"))
    theirs = sp.diff(to_sympy(e), X)
    assert sp.simplify(ours - theirs) == 0


def test_derivative_reuses_original_subtrees():
    inner = x * x
    e = sin(inner)
    d = differentiate(e, "x")
    assert d.left.operand is inner
    assert render(e) == "sin(x * x)"


def test_nth_derivative():
    second = nth_derivative(x ** 3, "x", 2)
    assert evaluate(second, {"x": 2}) == 12
    assert nth_derivative(x ** 3, "x", 0) == x ** 3
    with pytest.raises(ValueError):
        nth_derivative(x, "x", -1)


def test_unknown_operator_propagates():
    with pytest.raises(UnknownOperator):
        differentiate(sin(BinaryOp("%", x, Constant(2))), "x")
