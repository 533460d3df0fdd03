from torchshamir.cryptography._exceptions import InsufficientSharesError
from torchshamir.cryptography._shamir import (
    shamir_polynomial,
    shamir_reconstruct,
    shamir_recover_polynomial,
    shamir_shares,
    shamir_split,
)
from torchshamir.cryptography._shares import Shares

__all__ = [
    "InsufficientSharesError",
    "Shares",
    "shamir_polynomial",
    "shamir_reconstruct",
    "shamir_recover_polynomial",
    "shamir_shares",
    "shamir_split",
]
