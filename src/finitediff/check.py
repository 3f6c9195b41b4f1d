"""Checks analytic derivatives against finite-difference estimates.

Each helper builds the finite-difference derivative of ``function`` at ``x``
and compares it with the analytic one using the matching comparator from
:mod:`finitediff.compare`. The analytic derivative may be given as a
callable, which is evaluated at ``x``, or as an array.

Examples:
--------
>>> import numpy as np
>>> from finitediff.check import check_gradient
>>> f = lambda x: float(x[0] ** 2 + x[1] ** 2)
>>> df = lambda x: 2.0 * np.asarray(x)
>>> check_gradient(f, df, [1.0, 2.0], accuracy=1, eps=1e-6)
True
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from finitediff.calculus import finite_gradient, finite_hessian, finite_jacobian
from finitediff.compare import compare_gradient, compare_hessian, compare_jacobian
from finitediff.finite.stencil import DEFAULT_ACCURACY, DEFAULT_STEPSIZE, AccuracyOrder
from finitediff.logger import finitediff_logger
from finitediff.utils.numerics import relative_error
from finitediff.utils.types import Derivative, ScalarFunction, VectorFunction
from finitediff.utils.validate import as_point

__all__ = [
    "check_gradient",
    "check_jacobian",
    "check_hessian",
    "DEFAULT_TOLERANCE",
    "DEFAULT_HESSIAN_STEPSIZE",
]

#: Default tolerance of the derivative checks.
DEFAULT_TOLERANCE = 1e-4
#: Default step size of :func:`check_hessian`.
DEFAULT_HESSIAN_STEPSIZE = 1e-5


def check_gradient(
    function: ScalarFunction,
    gradient: Derivative,
    x: ArrayLike,
    tol: float = DEFAULT_TOLERANCE,
    label: str = "gradient",
    *,
    accuracy: AccuracyOrder | int = DEFAULT_ACCURACY,
    eps: float = DEFAULT_STEPSIZE,
    logger: logging.Logger | None = None,
) -> bool:
    """Returns True if ``gradient`` matches the finite-difference gradient.

    Args:
        function: Scalar-valued function.
        gradient: Analytic gradient, as a callable or a 1D array.
        x: Point at which both are evaluated.
        tol: Comparison tolerance.
        label: Label used in mismatch reports.
        accuracy: Stencil accuracy order of the approximation.
        eps: Step size of the approximation.
        logger: Where mismatches are reported. Defaults to
            ``finitediff_logger``.
    """
    x0 = as_point(x)
    expected = _evaluate(gradient, x0)
    approx = finite_gradient(function, x0, accuracy=accuracy, eps=eps)
    return _report(
        compare_gradient(expected, approx, tol, label, logger=logger),
        expected, approx, label, logger,
    )


def check_jacobian(
    function: VectorFunction,
    jacobian: Derivative,
    x: ArrayLike,
    tol: float = DEFAULT_TOLERANCE,
    label: str = "jacobian",
    *,
    accuracy: AccuracyOrder | int = DEFAULT_ACCURACY,
    eps: float = DEFAULT_STEPSIZE,
    logger: logging.Logger | None = None,
) -> bool:
    """Returns True if ``jacobian`` matches the finite-difference Jacobian.

    Same arguments as :func:`check_gradient`, with ``jacobian`` of shape
    ``(m, n)``.
    """
    x0 = as_point(x)
    expected = _evaluate(jacobian, x0)
    approx = finite_jacobian(function, x0, accuracy=accuracy, eps=eps)
    return _report(
        compare_jacobian(expected, approx, tol, label, logger=logger),
        expected, approx, label, logger,
    )


def check_hessian(
    function: ScalarFunction,
    hessian: Derivative,
    x: ArrayLike,
    tol: float = DEFAULT_TOLERANCE,
    label: str = "hessian",
    *,
    eps: float = DEFAULT_HESSIAN_STEPSIZE,
    logger: logging.Logger | None = None,
) -> bool:
    """Returns True if ``hessian`` matches the finite-difference Hessian.

    The Hessian stencil is first order in ``eps``, so ``tol`` usually has to
    be looser than for gradients.
    """
    x0 = as_point(x)
    expected = _evaluate(hessian, x0)
    approx = finite_hessian(function, x0, eps=eps)
    return _report(
        compare_hessian(expected, approx, tol, label, logger=logger),
        expected, approx, label, logger,
    )


def _evaluate(derivative: Derivative, x0: np.ndarray) -> np.ndarray:
    """Evaluates an analytic derivative given as a callable or an array."""
    if callable(derivative):
        derivative = derivative(x0.copy())
    return np.asarray(derivative, dtype=float)


def _report(
    same: bool,
    expected: np.ndarray,
    approx: np.ndarray,
    label: str,
    logger: logging.Logger | None,
) -> bool:
    log = finitediff_logger if logger is None else logger
    log.debug(
        "%s check %s: max scaled error %.3e",
        label, "passed" if same else "failed", relative_error(expected, approx),
    )
    return same
