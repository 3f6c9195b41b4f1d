"""Provides all finitediff methods."""

from importlib.metadata import PackageNotFoundError, version

from finitediff.calculus import finite_gradient, finite_hessian, finite_jacobian
from finitediff.check import check_gradient, check_hessian, check_jacobian
from finitediff.compare import compare_gradient, compare_hessian, compare_jacobian
from finitediff.finite.stencil import AccuracyOrder
from finitediff.finite_diff_kit import FiniteDiffKit

try:
    __version__ = version("finitediff")
except PackageNotFoundError:
    pass

__all__ = [
    "AccuracyOrder",
    "FiniteDiffKit",
    "check_gradient",
    "check_hessian",
    "check_jacobian",
    "compare_gradient",
    "compare_hessian",
    "compare_jacobian",
    "finite_gradient",
    "finite_hessian",
    "finite_jacobian",
]
