"""Shared typing aliases for finitediff."""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

Array: TypeAlias = NDArray[np.floating]
FloatArray: TypeAlias = NDArray[np.float64]

ArrayLike1D: TypeAlias = Sequence[float] | NDArray[np.floating]
ArrayLike2D: TypeAlias = Sequence[Sequence[float]] | NDArray[np.floating]

ScalarFunction: TypeAlias = Callable[[FloatArray], float]
VectorFunction: TypeAlias = Callable[[FloatArray], ArrayLike1D]
Derivative: TypeAlias = Union[Callable[[FloatArray], ArrayLike], ArrayLike]
