"""Unit tests for finitediff.calculus.jacobian."""

from functools import partial

import numpy as np
import pytest
from numpy.testing import assert_allclose

from finitediff import AccuracyOrder
from finitediff.calculus import finite_gradient, finite_jacobian


def f_linear_mat(th, mat: np.ndarray) -> np.ndarray:
    """Linear map f(θ)=Aθ."""
    return np.asarray(mat, float) @ np.asarray(th, float)


def f_analytic_2d(th) -> np.ndarray:
    """Analytic 2D map with known Jacobian."""
    x, y = np.asarray(th, float)
    return np.array([x**2, np.sin(y), x*y], dtype=float)


def f_plus_minus(th) -> np.ndarray:
    """Returns [x + y, x - y]."""
    x, y = np.asarray(th, float)
    return np.array([x + y, x - y], dtype=float)


def f_matrix_output(th) -> np.ndarray:
    """Returns a 2D output."""
    return np.outer(th, th)


def f_smooth_scalar(th) -> float:
    """Scalar function used to compare against the gradient."""
    x, y = np.asarray(th, float)
    return float(np.sin(x) * np.exp(y))


class GrowingOutput:
    """Returns one more component on every call."""

    def __init__(self):
        """Initialises the call counter."""
        self.n = 1

    def __call__(self, th):
        """Returns a vector of increasing length."""
        self.n += 1
        return np.zeros(self.n)


def test_jacobian_concrete_plus_minus():
    """Tests the Jacobian of [x0 + x1, x0 - x1] at (3, 1)."""
    jac = finite_jacobian(f_plus_minus, [3.0, 1.0])
    assert jac.shape == (2, 2)
    assert_allclose(jac, [[1.0, 1.0], [1.0, -1.0]], rtol=0, atol=1e-6)


@pytest.mark.parametrize("accuracy", list(AccuracyOrder))
def test_jacobian_linear_map(accuracy):
    """Tests that the Jacobian of a linear map equals its matrix at every order."""
    mat = np.array([[1.0, -2.0, 0.5],
                    [0.0,  3.0, 1.0]], dtype=float)
    theta0 = np.array([0.3, -0.7, 1.2], dtype=float)
    jac = finite_jacobian(partial(f_linear_mat, mat=mat), theta0, accuracy, eps=1e-3)
    assert jac.shape == (2, 3)
    assert_allclose(jac, mat, rtol=0, atol=1e-10)


def test_jacobian_analytic():
    """Tests the Jacobian of a map with a known analytic Jacobian."""
    x0, y0 = 0.4, -0.2
    jac = finite_jacobian(f_analytic_2d, [x0, y0], AccuracyOrder.FOURTH, eps=1e-5)
    jac_true = np.array([[2*x0, 0.0],
                         [0.0,  np.cos(y0)],
                         [y0,   x0]], dtype=float)
    assert jac.shape == (3, 2)
    assert_allclose(jac, jac_true, rtol=1e-8, atol=1e-9)


@pytest.mark.parametrize("m, n", [(1, 1), (1, 4), (5, 2), (3, 3)])
def test_jacobian_shape(m, n):
    """Tests that the Jacobian has shape (m, n)."""
    rng = np.random.default_rng(seed=42)
    mat = rng.normal(size=(m, n))
    jac = finite_jacobian(partial(f_linear_mat, mat=mat), rng.normal(size=n))
    assert jac.shape == (m, n)


def test_jacobian_scalar_output_is_single_row():
    """Tests that a scalar function gives a (1, n) Jacobian equal to its gradient."""
    point = np.array([0.3, 0.8])
    jac = finite_jacobian(f_smooth_scalar, point, 2, eps=1e-4)
    grad = finite_gradient(f_smooth_scalar, point, 2, eps=1e-4)
    assert jac.shape == (1, 2)
    assert_allclose(jac[0], grad, rtol=1e-12, atol=0)


@pytest.mark.parametrize("accuracy", list(AccuracyOrder))
def test_jacobian_evaluation_count(accuracy, recording_function):
    """Tests one baseline evaluation plus n * num_points stencil evaluations."""
    f = recording_function(f_plus_minus)
    finite_jacobian(f, [1.0, 2.0], accuracy=accuracy)
    assert f.calls == 1 + 2 * accuracy.num_points


def test_jacobian_does_not_modify_input():
    """Tests that the input point is left untouched."""
    point = np.array([0.4, -0.2])
    before = point.copy()
    finite_jacobian(f_analytic_2d, point, accuracy=3)
    assert np.array_equal(point, before)


def test_jacobian_empty_point():
    """Tests that an empty point gives an (m, 0) Jacobian."""
    jac = finite_jacobian(lambda th: np.ones(3), np.array([]))
    assert jac.shape == (3, 0)


def test_jacobian_rejects_changing_output_length():
    """Tests that a varying output length raises ValueError."""
    with pytest.raises(ValueError, match="output length"):
        finite_jacobian(GrowingOutput(), [1.0, 2.0])


def test_jacobian_rejects_matrix_output():
    """Tests that a 2D function output raises TypeError."""
    with pytest.raises(TypeError):
        finite_jacobian(f_matrix_output, [1.0, 2.0])


@pytest.mark.parametrize("accuracy", [-1, 4, "fourth"])
def test_jacobian_rejects_invalid_accuracy(accuracy):
    """Tests that an invalid accuracy selector raises ValueError."""
    with pytest.raises(ValueError):
        finite_jacobian(f_plus_minus, [1.0, 2.0], accuracy=accuracy)


def test_jacobian_rejects_invalid_step():
    """Tests that a zero step raises ValueError."""
    with pytest.raises(ValueError):
        finite_jacobian(f_plus_minus, [1.0, 2.0], eps=0.0)


def test_jacobian_propagates_model_errors():
    """Tests that exceptions from the model reach the caller unchanged."""
    def fails(th):
        raise ZeroDivisionError("bad model")

    with pytest.raises(ZeroDivisionError, match="bad model"):
        finite_jacobian(fails, [1.0])
