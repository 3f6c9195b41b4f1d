"""Tolerance-based comparison of derivative arrays.

The comparators decide whether an analytic derivative agrees with a
finite-difference estimate. Two entries ``a`` and ``b`` agree when::

    |a - b| <= tol * max(|a|, |b|, 1)

which acts as a relative tolerance for large entries and an absolute one
near zero. Every disagreeing entry is reported on a logger at ``DEBUG``
level; the scan never stops early.

Examples:
--------
>>> import numpy as np
>>> from finitediff.compare import compare_gradient
>>> compare_gradient(np.array([1.0, 2.0]), np.array([1.0, 2.0 + 1e-6]), 1e-4)
True
>>> compare_gradient(np.array([1.0]), np.array([1.0 + 2e-4]), 1e-4, "grad")
False
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from finitediff.logger import finitediff_logger
from finitediff.utils.numerics import tolerance_scale
from finitediff.utils.validate import validate_same_shape, validate_tolerance

__all__ = [
    "compare_gradient",
    "compare_jacobian",
    "compare_hessian",
]


def compare_gradient(
    x: ArrayLike,
    y: ArrayLike,
    tol: float,
    label: str = "",
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """Checks whether two gradients agree within ``tol``.

    Args:
        x: First 1D array.
        y: Second 1D array with the same length as ``x``.
        tol: Non-negative tolerance.
        label: Text prepended to every mismatch report.
        logger: Where mismatches are reported. Defaults to
            ``finitediff_logger``.

    Returns:
        True if every entry agrees.

    Raises:
        ValueError: If the inputs are not 1D arrays of equal length, or
            ``tol`` is negative.
    """
    x_arr, y_arr = validate_same_shape(x, y, 1, label="compare_gradient")
    failed = _mismatches(x_arr, y_arr, validate_tolerance(tol))
    log = finitediff_logger if logger is None else logger
    abs_diff, rel_x, rel_y = _diagnostics(x_arr, y_arr)
    for (r,) in zip(*np.nonzero(failed)):
        log.debug(
            "%s eps=%.3e r=%d x=%.3e y=%.3e |x-y|=%.3e |x-y|/|x|=%.3e |x-y|/|y|=%.3e",
            label, tol, r, x_arr[r], y_arr[r], abs_diff[r], rel_x[r], rel_y[r],
        )
    return not failed.any()


def compare_jacobian(
    x: ArrayLike,
    y: ArrayLike,
    tol: float,
    label: str = "",
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """Checks whether two Jacobians agree entrywise within ``tol``.

    Args:
        x: First 2D array.
        y: Second 2D array with the same shape as ``x``.
        tol: Non-negative tolerance.
        label: Text prepended to every mismatch report.
        logger: Where mismatches are reported. Defaults to
            ``finitediff_logger``.

    Returns:
        True if every entry agrees.

    Raises:
        ValueError: If the inputs are not 2D arrays of equal shape, or
            ``tol`` is negative.
    """
    x_arr, y_arr = validate_same_shape(x, y, 2, label="compare_jacobian")
    failed = _mismatches(x_arr, y_arr, validate_tolerance(tol))
    log = finitediff_logger if logger is None else logger
    abs_diff, rel_x, rel_y = _diagnostics(x_arr, y_arr)
    for r, c in zip(*np.nonzero(failed)):
        log.debug(
            "%s eps=%.3e r=%d c=%d x=%.3e y=%.3e |x-y|=%.3e |x-y|/|x|=%.3e |x-y|/|y|=%.3e",
            label, tol, r, c, x_arr[r, c], y_arr[r, c],
            abs_diff[r, c], rel_x[r, c], rel_y[r, c],
        )
    return not failed.any()


def compare_hessian(
    x: ArrayLike,
    y: ArrayLike,
    tol: float,
    label: str = "",
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """Checks whether two Hessians agree entrywise within ``tol``.

    Same as :func:`compare_jacobian`.
    """
    return compare_jacobian(x, y, tol, label, logger=logger)


def _mismatches(x: np.ndarray, y: np.ndarray, tol: float) -> np.ndarray:
    """Returns a boolean mask of entries outside the scaled tolerance."""
    with np.errstate(invalid="ignore", over="ignore"):
        ok = (x == y) | (np.abs(x - y) <= tol * tolerance_scale(x, y))
    return ~ok


def _diagnostics(x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Returns ``|x-y|``, ``|x-y|/|x|`` and ``|x-y|/|y|``; zeros give inf or nan."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        abs_diff = np.abs(x - y)
        return abs_diff, abs_diff / np.abs(x), abs_diff / np.abs(y)
