import math

import torch
from torch import Tensor

MERSENNE_PRIME_31 = 2**31 - 1

# Residues below 2**31 keep every product of two residues inside int64.
_MAX_MODULUS = 2**31


def field_check_modulus(modulus: int) -> None:
    """Validate a prime field modulus.

    Parameters
    ----------
    modulus : int
        Candidate prime p.

    Raises
    ------
    ValueError
        If modulus is not an int, is not in (1, 2**31), or is not prime.
    """
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise ValueError(
            f"modulus must be an int, got {type(modulus).__name__}"
        )
    if not 1 < modulus < _MAX_MODULUS:
        raise ValueError(
            f"modulus must be in (1, 2**31) so products fit in int64, "
            f"got {modulus}"
        )
    if modulus % 2 == 0 and modulus != 2:
        raise ValueError(f"modulus must be prime, got {modulus}")
    for d in range(3, math.isqrt(modulus) + 1, 2):
        if modulus % d == 0:
            raise ValueError(f"modulus must be prime, got {modulus}")


def _as_residues(a: Tensor, modulus: int, name: str = "input") -> Tensor:
    if a.dtype.is_floating_point or a.dtype.is_complex or a.dtype == torch.bool:
        raise ValueError(
            f"{name} must have an integer dtype for field arithmetic, "
            f"got {a.dtype}"
        )
    return torch.remainder(a.to(torch.int64), modulus)
