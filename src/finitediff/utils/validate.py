"""Validation utilities for finitediff."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "as_point",
    "validate_stepsize",
    "validate_tolerance",
    "validate_same_shape",
    "scalar_output",
    "vector_output",
    "readonly_view",
]


def as_point(x: ArrayLike, *, name: str = "x") -> NDArray[np.float64]:
    """Converts an evaluation point to a 1D float array.

    Args:
        x: Array-like point.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64. The input is never returned
        as-is, so callers may not rely on identity.

    Raises:
        ValueError: If the converted array is not 1D.
    """
    arr = np.array(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr


def validate_stepsize(eps: float) -> float:
    """Checks that a step size is a positive finite number.

    Raises:
        ValueError: If ``eps`` is not finite or not positive.
    """
    eps = float(eps)
    if not np.isfinite(eps) or eps <= 0:
        raise ValueError(f"eps must be positive and finite; got {eps}.")
    return eps


def validate_tolerance(tol: float) -> float:
    """Checks that a comparison tolerance is a non-negative number.

    Raises:
        ValueError: If ``tol`` is negative or NaN.
    """
    tol = float(tol)
    if not tol >= 0:
        raise ValueError(f"tol must be non-negative; got {tol}.")
    return tol


def validate_same_shape(
    x: ArrayLike,
    y: ArrayLike,
    ndim: int,
    *,
    label: str = "",
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Converts two arrays to float and checks rank and shape agree.

    Args:
        x: First array-like.
        y: Second array-like.
        ndim: Required number of dimensions of both arrays.
        label: Optional prefix included in error messages.

    Returns:
        Tuple of (x_array, y_array).

    Raises:
        ValueError: If either array has the wrong rank or the shapes differ.
    """
    prefix = f"[{label}] " if label else ""
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.ndim != ndim or y_arr.ndim != ndim:
        raise ValueError(
            f"{prefix}expected {ndim}D arrays; got shapes {x_arr.shape} and {y_arr.shape}."
        )
    if x_arr.shape != y_arr.shape:
        raise ValueError(
            f"{prefix}shape mismatch: {x_arr.shape} != {y_arr.shape}."
        )
    return x_arr, y_arr


def scalar_output(value: Any) -> NDArray[np.float64]:
    """Returns a function value as a 0D float array.

    Raises:
        TypeError: If ``value`` holds more than one number.
    """
    arr = np.asarray(value, dtype=float)
    if arr.size != 1:
        raise TypeError(
            f"expected a scalar-valued function; got output of shape {arr.shape}."
        )
    return arr.reshape(())


def vector_output(value: Any, size: int | None = None) -> NDArray[np.float64]:
    """Returns a function value as a 1D float array.

    Scalars are promoted to length-1 vectors.

    Args:
        value: The function output.
        size: Expected length. If None, any length is accepted.

    Raises:
        TypeError: If ``value`` has more than one dimension.
        ValueError: If the length differs from ``size``.
    """
    arr = np.atleast_1d(np.asarray(value, dtype=float))
    if arr.ndim != 1:
        raise TypeError(
            f"expected a vector-valued function with 1D output; got shape {arr.shape}."
        )
    if size is not None and arr.size != size:
        raise ValueError(
            f"function output length changed between evaluations: "
            f"expected {size}, got {arr.size}."
        )
    return arr


def readonly_view(arr: np.ndarray) -> np.ndarray:
    """Returns a view of ``arr`` that cannot be written through.

    Writes to ``arr`` itself remain visible through the view.
    """
    view = arr.view()
    view.flags.writeable = False
    return view
