"""Contains functions used to construct the gradient of scalar-valued functions."""

from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from finitediff.finite.core import stencil_partial
from finitediff.finite.stencil import (
    DEFAULT_ACCURACY,
    DEFAULT_STEPSIZE,
    AccuracyOrder,
    get_stencil,
)
from finitediff.utils.types import ScalarFunction
from finitediff.utils.validate import (
    as_point,
    readonly_view,
    scalar_output,
    validate_stepsize,
)

__all__ = ["finite_gradient"]


def finite_gradient(
    function: ScalarFunction,
    x: ArrayLike,
    accuracy: AccuracyOrder | int = DEFAULT_ACCURACY,
    eps: float = DEFAULT_STEPSIZE,
) -> NDArray[np.float64]:
    """Returns the finite-difference gradient of a scalar-valued function.

    Every coordinate is differentiated independently with the central
    stencil selected by ``accuracy``, for a total of
    ``x.size * accuracy.num_points`` function evaluations.

    Args:
        function: The function to be differentiated. It receives a read-only
            1D float array and must return a single number.
        x: The point at which the gradient is evaluated.
        accuracy: The stencil accuracy order, as an ``AccuracyOrder`` or its
            index 0 to 3. Default is ``AccuracyOrder.SECOND``.
        eps: Step size. Default is ``1e-8``.

    Returns:
        A 1D array with one partial derivative per coordinate of ``x``.

    Raises:
        ValueError: If ``accuracy`` or ``eps`` is invalid, or ``x`` is not 1D.
        TypeError: If ``function`` does not return a scalar value.
    """
    x0 = as_point(x)
    stencil = get_stencil(accuracy)
    eps = validate_stepsize(eps)

    work = x0.copy()
    component = partial(
        stencil_partial,
        function,
        x0,
        work,
        readonly_view(work),
        stencil=stencil,
        stepsize=eps,
        convert=scalar_output,
    )

    grad = np.empty(x0.size, dtype=np.float64)
    for d in range(x0.size):
        grad[d] = component(d)
    return grad
