"""Contains functions used to construct the Jacobian matrix."""

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
from finitediff.utils.types import VectorFunction
from finitediff.utils.validate import (
    as_point,
    readonly_view,
    validate_stepsize,
    vector_output,
)

__all__ = ["finite_jacobian"]


def finite_jacobian(
    function: VectorFunction,
    x: ArrayLike,
    accuracy: AccuracyOrder | int = DEFAULT_ACCURACY,
    eps: float = DEFAULT_STEPSIZE,
) -> NDArray[np.float64]:
    """Computes the finite-difference Jacobian of a vector-valued function.

    Each column in the Jacobian is the derivative with respect to one
    coordinate of ``x``. The function is evaluated once at ``x`` to learn the
    output length, then ``accuracy.num_points`` times per coordinate.

    Args:
        function: The vector-valued function to be differentiated. It
            receives a read-only 1D float array and returns a 1D array-like
            of fixed length. Scalar outputs count as length 1.
        x: The point at which the Jacobian is evaluated.
        accuracy: The stencil accuracy order, as an ``AccuracyOrder`` or its
            index 0 to 3. Default is ``AccuracyOrder.SECOND``.
        eps: Step size. Default is ``1e-8``.

    Returns:
        A 2D array of shape ``(m, n)`` where ``m`` is the output length and
        ``n`` is ``x.size``.

    Raises:
        ValueError: If ``accuracy`` or ``eps`` is invalid, ``x`` is not 1D, or
            the output length changes between evaluations.
        TypeError: If ``function`` returns an array with more than one
            dimension.
    """
    x0 = as_point(x)
    stencil = get_stencil(accuracy)
    eps = validate_stepsize(eps)

    work = x0.copy()
    view = readonly_view(work)
    m = vector_output(function(view)).size

    column = partial(
        stencil_partial,
        function,
        x0,
        work,
        view,
        stencil=stencil,
        stepsize=eps,
        convert=partial(vector_output, size=m),
    )

    jac = np.empty((m, x0.size), dtype=np.float64)
    for d in range(x0.size):
        jac[:, d] = column(d)
    return jac
