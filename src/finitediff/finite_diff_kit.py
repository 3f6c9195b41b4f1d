"""Provides the FiniteDiffKit class.

A light wrapper around the calculus builders that binds a function and a
point, so several derivatives of the same function can be taken without
repeating them.

Typical usage examples:

>>> import numpy as np
>>> from finitediff.finite_diff_kit import FiniteDiffKit
>>>
>>> def sum_squares(x):
...     return float(np.sum(np.asarray(x) ** 2))
>>>
>>> kit = FiniteDiffKit(sum_squares, x0=np.array([1.0, 2.0]))
>>> grad = kit.gradient(accuracy=1, eps=1e-6)
>>> hess = kit.hessian(eps=1e-4)
"""

from collections.abc import Callable
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .calculus import finite_gradient, finite_hessian, finite_jacobian
from .finite.stencil import DEFAULT_ACCURACY, DEFAULT_STEPSIZE, AccuracyOrder


class FiniteDiffKit:
    """Provides finite-difference gradient, Jacobian, and Hessian at a fixed point."""

    def __init__(
        self,
        function: Callable[[np.ndarray], float | ArrayLike],
        x0: Sequence[float] | np.ndarray,
    ):
        """Initialise with function and evaluation point.

        Args:
            function: Maps a 1D float array to a scalar (for gradient and
                Hessian) or to a 1D array (for the Jacobian).
            x0: Point at which to evaluate derivatives (shape (n,)).
        """
        self.function = function
        self.x0 = np.asarray(x0, dtype=float)

    def gradient(
        self,
        *,
        accuracy: AccuracyOrder | int = DEFAULT_ACCURACY,
        eps: float = DEFAULT_STEPSIZE,
    ) -> NDArray[np.floating]:
        """Returns the gradient of a scalar-valued function."""
        return finite_gradient(self.function, self.x0, accuracy=accuracy, eps=eps)

    def jacobian(
        self,
        *,
        accuracy: AccuracyOrder | int = DEFAULT_ACCURACY,
        eps: float = DEFAULT_STEPSIZE,
    ) -> NDArray[np.floating]:
        """Returns the Jacobian of a vector-valued function."""
        return finite_jacobian(self.function, self.x0, accuracy=accuracy, eps=eps)

    def hessian(self, *, eps: float = DEFAULT_STEPSIZE) -> NDArray[np.floating]:
        """Returns the Hessian of a scalar-valued function."""
        return finite_hessian(self.function, self.x0, eps=eps)
