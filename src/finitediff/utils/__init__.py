"""Utility functions for the finitediff package."""

from .numerics import relative_error, tolerance_scale

__all__ = [
    "relative_error",
    "tolerance_scale",
]
