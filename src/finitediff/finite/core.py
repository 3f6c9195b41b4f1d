"""Single-coordinate central finite-difference evaluation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from .stencil import Stencil

__all__ = [
    "stencil_partial",
]


def stencil_partial(
    function: Callable[[np.ndarray], Any],
    x0: NDArray[np.float64],
    work: NDArray[np.float64],
    view: np.ndarray,
    index: int,
    stencil: Stencil,
    stepsize: float,
    convert: Callable[[Any], NDArray[np.float64]],
) -> NDArray[np.float64]:
    """Returns the stencil estimate of the partial derivative along ``index``.

    The coordinate ``work[index]`` is moved to each stencil offset in turn
    and reset to ``x0[index]`` after every evaluation, so ``work`` equals
    ``x0`` again on return.

    Args:
        function: The function being differentiated. It is called with
            ``view``.
        x0: The unperturbed point.
        work: Working copy of ``x0`` that is perturbed in place.
        view: Read-only view of ``work`` handed to ``function``.
        index: The coordinate to perturb.
        stencil: The central stencil to apply.
        stepsize: The step size (eps).
        convert: Turns a raw function value into a float array of the
            expected shape. Raises if the value does not fit.

    Returns:
        The partial derivative, with the shape produced by ``convert``.
    """
    acc = None
    for coeff, offset in zip(stencil.coefficients, stencil.offsets):
        work[index] = x0[index] + offset * stepsize
        try:
            value = convert(function(view))
        finally:
            work[index] = x0[index]
        acc = coeff * value if acc is None else acc + coeff * value
    return acc / (stencil.denominator * stepsize)
