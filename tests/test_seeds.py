"""
Tests for the functional helpers and for operator gradients against central
finite differences.
"""

import math

import pytest

from scalar_aad.aad import Node, grad, grads, grads_list, value

EPS = 1e-6


def _central_diff(f, xs, i):
    up = list(xs)
    dn = list(xs)
    up[i] += EPS
    dn[i] -= EPS
    return (f(up) - f(dn)) / (2.0 * EPS)


def test_value_passthrough():
    assert value(Node.leaf(3.5)) == 3.5
    assert value(2.0) == 2.0


def test_grads_list_docstring_example():
    f = lambda xs: xs[0] * xs[0] + 3 * xs[1]
    assert grads_list(f, [2.0, 4.0]) == [4.0, 3.0]


def test_grad_single_input():
    assert grad(lambda x: x ** 3, 2.0) == pytest.approx(12.0)
    assert grad(lambda x: x, 7.0) == 1.0


def test_grad_of_constant_function_is_zero():
    assert grad(lambda x: 4.0, 1.0) == 0.0


def test_grads_dict_keeps_input_order():
    out = grads(lambda v: v["a"] * v["b"] - v["c"], {"a": 2.0, "b": 5.0, "c": 1.0})
    assert list(out) == ["a", "b", "c"]
    assert out == {"a": 5.0, "b": 2.0, "c": -1.0}


def test_helpers_reject_non_scalar_output():
    with pytest.raises(ValueError):
        grad(lambda x: [x, x], 1.0)
    with pytest.raises(ValueError):
        grads_list(lambda xs: xs, [1.0, 2.0])


@pytest.mark.parametrize(
    "f_node, f_float, point",
    [
        (lambda v: v[0] + v[1], lambda v: v[0] + v[1], [1.3, -0.7]),
        (lambda v: v[0] - v[1], lambda v: v[0] - v[1], [1.3, -0.7]),
        (lambda v: v[0] * v[1], lambda v: v[0] * v[1], [1.3, -0.7]),
        (lambda v: v[0] / v[1], lambda v: v[0] / v[1], [1.3, -0.7]),
        (lambda v: -v[0] * v[1], lambda v: -v[0] * v[1], [1.3, -0.7]),
        (lambda v: v[0] ** 3 + v[1] ** -2, lambda v: v[0] ** 3 + v[1] ** -2, [1.3, -0.7]),
        (lambda v: v[0].exp() * v[1], lambda v: math.exp(v[0]) * v[1], [0.4, 2.0]),
        (lambda v: (v[0] * v[1]).tanh(), lambda v: math.tanh(v[0] * v[1]), [0.4, 2.0]),
    ],
)
def test_operator_gradients_match_finite_differences(f_node, f_float, point):
    analytic = grads_list(f_node, point)
    for i in range(len(point)):
        assert analytic[i] == pytest.approx(_central_diff(f_float, point, i), rel=1e-5, abs=1e-7)


def test_composite_expression_matches_finite_differences():
    def f_node(v):
        x, y = v
        return (x * y + x.exp() / y).tanh() - x ** 3 + 1.0 / (y * y)

    def f_float(v):
        x, y = v
        return math.tanh(x * y + math.exp(x) / y) - x ** 3 + 1.0 / (y * y)

    point = [0.3, 1.7]
    analytic = grads_list(f_node, point)
    for i in range(2):
        assert analytic[i] == pytest.approx(_central_diff(f_float, point, i), rel=1e-5, abs=1e-7)
