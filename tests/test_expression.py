import numpy as np
import pytest

from symbolic_expression import (
    Expression, EngineConfig, UnboundVariablePolicy, COMPLEX,
    Constant, var, sin
)
from symbolic_expression.exceptions import UnboundVariable, UnsupportedOperation

x = var("x")


def test_evaluate_and_render():
    expr = Expression(x ** 2 + 3)
    assert expr.evaluate({"x": 2}) == 7
    assert expr.to_string() == "((x ^ 2) + 3)"
    assert str(expr) == expr.to_string()


def test_plain_numbers_are_wrapped():
    expr = Expression(4)
    assert expr.root == Constant(4)
    assert expr.evaluate() == 4


def test_diff_returns_unsimplified_by_default():
    expr = Expression(sin(x))
    assert expr.diff("x").to_string() == "(cos(x) * 1)"
    assert expr.diff("x").simplify().to_string() == "cos(x)"


def test_diff_with_simplify_derivatives():
    expr = Expression(sin(x), EngineConfig(simplify_derivatives=True))
    derivative = expr.diff("x")
    assert derivative.to_string() == "cos(x)"
    assert derivative.config is expr.config


def test_unbound_variable_policy_from_config():
    assert Expression(x + 1, EngineConfig(on_unbound_variable=UnboundVariablePolicy.ZERO)).evaluate({}) == 1
    with pytest.raises(UnboundVariable):
        Expression(x + 1).evaluate({})


def test_complex_config():
    expr = Expression(x * x + Constant(3 - 4j), EngineConfig(field=COMPLEX))
    assert expr.evaluate({"x": 1j}) == 2 - 4j
    assert Expression(Constant(3 - 4j)).to_string() == "(3 - 4i)"
    with pytest.raises(UnsupportedOperation):
        Expression(x ** 2, EngineConfig(field=COMPLEX)).diff("x")


def test_evaluate_batch():
    expr = Expression(x * 2)
    np.testing.assert_allclose(expr.evaluate_batch({"x": [1.0, 2.0, 3.0]}), [2.0, 4.0, 6.0])


def test_sympy_and_latex():
    expr = Expression(x ** 2 + 3)
    assert str(expr.to_sympy()) == "x**2 + 3"
    assert "x^{2}" in expr.to_latex()


def test_structure_queries():
    expr = Expression(sin(x) * var("y"))
    assert expr.size() == 4
    assert expr.depth() == 3
    assert expr.free_variables() == frozenset({"x", "y"})


def test_equality_and_hash():
    a = Expression(x + 1)
    b = Expression(x + 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Expression(x + 2)
    assert a != "x + 1"
