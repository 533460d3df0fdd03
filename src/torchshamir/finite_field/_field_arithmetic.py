import torch
from torch import Tensor

from ._modulus import _as_residues


def field_add(a: Tensor, b: Tensor, modulus: int) -> Tensor:
    """Return (a + b) mod p elementwise."""
    a = _as_residues(a, modulus, "a")
    b = _as_residues(b, modulus, "b")
    return torch.remainder(a + b, modulus)


def field_subtract(a: Tensor, b: Tensor, modulus: int) -> Tensor:
    """Return (a - b) mod p elementwise, always in [0, p)."""
    a = _as_residues(a, modulus, "a")
    b = _as_residues(b, modulus, "b")
    return torch.remainder(a - b, modulus)


def field_multiply(a: Tensor, b: Tensor, modulus: int) -> Tensor:
    """Return (a * b) mod p elementwise."""
    a = _as_residues(a, modulus, "a")
    b = _as_residues(b, modulus, "b")
    return torch.remainder(a * b, modulus)


def field_power(a: Tensor, exponent: int, modulus: int) -> Tensor:
    """Raise residues to a non-negative power by square-and-multiply.

    Parameters
    ----------
    a : Tensor
        Integer tensor of bases.
    exponent : int
        Non-negative exponent shared by all elements.
    modulus : int
        Prime modulus p.

    Returns
    -------
    Tensor
        a**exponent mod p, int64, same shape as a.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    base = _as_residues(a, modulus, "a")
    result = torch.ones_like(base)
    while exponent:
        if exponent & 1:
            result = torch.remainder(result * base, modulus)
        base = torch.remainder(base * base, modulus)
        exponent >>= 1
    return result


def field_inverse(a: Tensor, modulus: int) -> Tensor:
    """Multiplicative inverse modulo a prime.

    Uses Fermat's little theorem, a^(p-2) = a^(-1) mod p.

    Raises
    ------
    ZeroDivisionError
        If any element is congruent to zero.
    """
    a = _as_residues(a, modulus, "a")
    if torch.any(a == 0):
        raise ZeroDivisionError("Zero has no multiplicative inverse mod p")
    return field_power(a, modulus - 2, modulus)
