"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "tolerance_scale",
    "relative_error",
]


def tolerance_scale(a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Returns ``max(|a|, |b|, 1)`` componentwise.

    Multiplying a tolerance by this scale makes it relative for entries of
    large magnitude and absolute for entries near zero.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))


def relative_error(a: np.ndarray, b: np.ndarray) -> float:
    """Computes the relative error metric between a and b.

    This metric is defined as the maximum over all components of a and b of
    the absolute difference divided by the maximum of 1.0 and the absolute values of
    a and b.

    Args:
        a: First array-like input.
        b: Second array-like input.

    Returns:
        The relative error metric as a float. Empty inputs give ``0.0``.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.size == 0 and b.size == 0:
        return 0.0
    return float(np.max(np.abs(a - b) / tolerance_scale(a, b)))
