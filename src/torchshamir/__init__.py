"""torchshamir: Shamir's Secret Sharing polynomials as PyTorch tensors."""

from . import (
    chart,
    cryptography,
    finite_field,
    polynomial,
)

__all__ = [
    "chart",
    "cryptography",
    "finite_field",
    "polynomial",
]

__version__ = "0.1.0"
