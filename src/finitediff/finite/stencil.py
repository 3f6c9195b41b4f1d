"""Stencil definitions for first-derivative central finite differences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "AccuracyOrder",
    "Stencil",
    "get_stencil",
    "resolve_accuracy",
    "truncation_order_from_coeffs",
    "COEFFICIENTS",
    "OFFSETS",
    "DENOMINATORS",
    "TRUNCATION_ORDER",
    "DEFAULT_ACCURACY",
    "DEFAULT_STEPSIZE",
]


class AccuracyOrder(IntEnum):
    """Selects the central-difference stencil by its truncation-error order.

    The integer value is the index into the stencil tables, so plain ints
    0 to 3 may be used wherever an ``AccuracyOrder`` is expected.
    """

    SECOND = 0
    FOURTH = 1
    SIXTH = 2
    EIGHTH = 3

    @property
    def order(self) -> int:
        """Power of the step size in the truncation error."""
        return 2 * (int(self) + 1)

    @property
    def num_points(self) -> int:
        """Number of function evaluations per coordinate."""
        return 2 * (int(self) + 1)

    @classmethod
    def from_order(cls, order: int) -> AccuracyOrder:
        """Returns the member whose truncation-error order is ``order``.

        Raises:
            ValueError: If ``order`` is not one of 2, 4, 6 or 8.
        """
        for member in cls:
            if member.order == order:
                return member
        raise ValueError(
            f"Unsupported accuracy order: {order!r}. "
            f"Must be one of {[m.order for m in cls]}."
        )


#: Outer coefficients c1 in c1 * f(x + c2 * eps), indexed by accuracy order.
COEFFICIENTS = (
    (1.0, -1.0),
    (1.0, -8.0, 8.0, -1.0),
    (-1.0, 9.0, -45.0, 45.0, -9.0, 1.0),
    (3.0, -32.0, 168.0, -672.0, 672.0, -168.0, 32.0, -3.0),
)
#: Inner offsets c2 in c1 * f(x + c2 * eps), indexed by accuracy order.
OFFSETS = (
    (1.0, -1.0),
    (-2.0, -1.0, 1.0, 2.0),
    (-3.0, -2.0, -1.0, 1.0, 2.0, 3.0),
    (-4.0, -3.0, -2.0, -1.0, 1.0, 2.0, 3.0, 4.0),
)
#: Denominators; the weighted sum is divided by ``denominator * eps``.
DENOMINATORS = (2.0, 12.0, 60.0, 840.0)

#: Default accuracy order used by the gradient and Jacobian builders.
DEFAULT_ACCURACY = AccuracyOrder.SECOND
#: Default step size.
DEFAULT_STEPSIZE = 1e-8


@dataclass(frozen=True)
class Stencil:
    """Coefficients, offsets and denominator of one central stencil."""

    accuracy: AccuracyOrder
    coefficients: NDArray[np.float64]
    offsets: NDArray[np.float64]
    denominator: float

    def __len__(self) -> int:
        return self.coefficients.size


def resolve_accuracy(accuracy: AccuracyOrder | int) -> AccuracyOrder:
    """Converts an accuracy selector into an ``AccuracyOrder``.

    Args:
        accuracy: An ``AccuracyOrder`` member or its integer index (0 to 3).

    Returns:
        The matching ``AccuracyOrder``.

    Raises:
        ValueError: If ``accuracy`` is not a valid index.
    """
    if isinstance(accuracy, AccuracyOrder):
        return accuracy
    if isinstance(accuracy, (bool, np.bool_)) or not isinstance(accuracy, (int, np.integer)):
        raise ValueError(
            f"accuracy must be an AccuracyOrder or an int in 0..3; got {accuracy!r}."
        )
    try:
        return AccuracyOrder(int(accuracy))
    except ValueError:
        raise ValueError(
            f"Unsupported accuracy index: {accuracy}. "
            f"Must be one of {[int(m) for m in AccuracyOrder]}."
        ) from None


def get_stencil(accuracy: AccuracyOrder | int) -> Stencil:
    """Returns the stencil for the requested accuracy order."""
    acc = resolve_accuracy(accuracy)
    return Stencil(
        accuracy=acc,
        coefficients=np.asarray(COEFFICIENTS[acc], dtype=np.float64),
        offsets=np.asarray(OFFSETS[acc], dtype=np.float64),
        denominator=DENOMINATORS[acc],
    )


def truncation_order_from_coeffs(
    offsets: NDArray[np.float64],
    coeffs: NDArray[np.float64],
    deriv_order: int = 1,
    tol: float = 1e-12,
) -> int:
    """Computes the truncation order of a stencil from its moments.

    The moments ``sum(c * k**r)`` vanish for ``r`` below the derivative order
    and for every ``r`` the stencil is exact on. The first non-vanishing
    moment past ``deriv_order`` fixes the leading error term.

    Args:
        offsets: Stencil offsets.
        coeffs: Stencil coefficients. A common scale factor may be left
            in since only vanishing moments matter.
        deriv_order: The derivative order the stencil approximates.
        tol: Threshold below which a moment counts as zero.

    Returns:
        The truncation order.
    """
    m = deriv_order
    max_r = 40

    for r in range(m + 1, max_r + 1):
        moment = float(np.dot(coeffs, offsets**r))
        if abs(moment) > tol:
            return r - m
    raise RuntimeError("Could not detect truncation order.")


def _build_truncation_orders() -> dict[AccuracyOrder, int]:
    """Computes the truncation order of every tabulated stencil."""
    out: dict[AccuracyOrder, int] = {}
    for acc in AccuracyOrder:
        s = get_stencil(acc)
        out[acc] = truncation_order_from_coeffs(s.offsets, s.coefficients)
    return out


#: Truncation order of each tabulated stencil, derived from its coefficients.
TRUNCATION_ORDER = _build_truncation_orders()
