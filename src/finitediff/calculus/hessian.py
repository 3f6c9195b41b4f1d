"""Contains functions used in constructing the Hessian of a scalar-valued function."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from finitediff.finite.stencil import DEFAULT_STEPSIZE
from finitediff.utils.types import ScalarFunction
from finitediff.utils.validate import (
    as_point,
    readonly_view,
    scalar_output,
    validate_stepsize,
)

__all__ = ["finite_hessian"]


def finite_hessian(
    function: ScalarFunction,
    x: ArrayLike,
    eps: float = DEFAULT_STEPSIZE,
) -> NDArray[np.float64]:
    """Returns the finite-difference Hessian of a scalar-valued function.

    Every entry, diagonal included, uses the same four-point formula::

        H[i, j] = (f(x + eps e_i + eps e_j) - f(x + eps e_i)
                   - f(x + eps e_j) + f(x)) / eps**2

    The error of this stencil is first order in ``eps`` and the rounding error
    grows like ``1 / eps**2``, so step sizes around ``1e-4`` to ``1e-5`` work
    better than the gradient default. All ``4 * n**2`` evaluations are
    performed; nothing is cached between entries.

    Args:
        function: The function to be differentiated. It receives a read-only
            1D float array and must return a single number.
        x: The point at which the Hessian is evaluated.
        eps: Step size. Default is ``1e-8``.

    Returns:
        A 2D array of shape ``(n, n)``. It is symmetric only up to the
        truncation and rounding error of the stencil.

    Raises:
        ValueError: If ``eps`` is invalid or ``x`` is not 1D.
        TypeError: If ``function`` does not return a scalar value.
    """
    x0 = as_point(x)
    eps = validate_stepsize(eps)
    n = x0.size

    work = x0.copy()
    view = readonly_view(work)

    def f():
        return float(scalar_output(function(view)))

    hess = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            try:
                f4 = f()
                work[i] += eps
                work[j] += eps
                f1 = f()
                work[j] -= eps
                f2 = f()
                work[j] += eps
                work[i] -= eps
                f3 = f()
            finally:
                work[i] = x0[i]
                work[j] = x0[j]
            hess[i, j] = (f1 - f2 - f3 + f4) / (eps * eps)
    return hess
