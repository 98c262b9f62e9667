"""
Domain value objects.

Contains the matrix shape model shared by the math layer.
"""

from advmath.core.domain.shape import MatrixShape

__all__ = [
    "MatrixShape",
]
