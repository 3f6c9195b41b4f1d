"""Calculus utilities.

Provides finite-difference builders for gradients, Jacobians and Hessians.
"""

from .gradient import finite_gradient
from .hessian import finite_hessian
from .jacobian import finite_jacobian

__all__ = ["finite_gradient", "finite_jacobian", "finite_hessian"]
