import warnings
from typing import Optional, Union

import torch
from torch import Tensor

from torchshamir.finite_field import (
    field_check_modulus,
    field_evaluate,
    field_inverse,
    field_lagrange_interpolate,
)
from torchshamir.polynomial import (
    Polynomial,
    lagrange_interpolate,
    polynomial,
    polynomial_evaluate,
    polynomial_fit,
)

from ._exceptions import InsufficientSharesError
from ._shares import Shares

_LOW_PRECISION_DTYPES = (torch.float16, torch.bfloat16)

# Largest magnitude below which every integer is representable.
_EXACT_INTEGER_LIMITS = {
    torch.float16: 2**11,
    torch.bfloat16: 2**8,
    torch.float32: 2**24,
}


def _check_threshold(k: int) -> None:
    if k < 1:
        raise ValueError(f"Threshold k must be at least 1, got {k}")


def _check_share_x(x: Tensor, modulus: Optional[int]) -> None:
    if x.dim() != 1:
        raise ValueError(
            f"Share x-coordinates must be 1-dimensional, "
            f"got shape {tuple(x.shape)}"
        )
    if modulus is not None:
        if x.dtype.is_floating_point or x.dtype.is_complex:
            raise ValueError(
                f"Share x-coordinates must be integers in GF(p), got {x.dtype}"
            )
        if torch.any((x < 1) | (x >= modulus)):
            raise ValueError(
                f"Share x-coordinates must lie in [1, {modulus}) so that "
                f"none of them evaluates the secret directly"
            )
    elif torch.any(x == 0):
        raise ValueError(
            "Share x-coordinates must be nonzero: the value at x = 0 "
            "is the secret itself"
        )
    if torch.unique(x).numel() != x.numel():
        raise ValueError("Share x-coordinates must be distinct")


def _check_shares(shares: Shares, k: int, modulus: Optional[int]) -> None:
    _check_threshold(k)
    if modulus is not None:
        field_check_modulus(modulus)

    n = shares.x.shape[0]
    if n < k:
        raise InsufficientSharesError(
            f"Need at least {k} shares to reconstruct the secret, got {n}"
        )
    _check_share_x(shares.x, modulus)


def shamir_polynomial(
    secret: Union[Tensor, float, int],
    k: int,
    *,
    modulus: Optional[int] = None,
    coefficient_bound: int = 10,
    generator: Optional[torch.Generator] = None,
) -> Polynomial:
    """Draw a random polynomial whose constant term is the secret.

    Parameters
    ----------
    secret : Tensor or number
        Secret value(s), any shape. Each element gets its own polynomial.
        Over the reals, Python numbers and integer tensors are promoted
        to float64.
    k : int
        Threshold. The polynomial has k coefficients (degree k - 1).
    modulus : int, optional
        Prime p. When given, the polynomial lives in GF(p): the secret
        must be an integer tensor with values in [0, p) and the random
        coefficients are uniform in [0, p). When omitted, the polynomial
        is real-valued.
    coefficient_bound : int
        Real domain only. Random coefficients are integers drawn
        uniformly from [-coefficient_bound, coefficient_bound].
    generator : torch.Generator, optional
        Random number generator for reproducibility.

    Returns
    -------
    Polynomial
        Coefficients of shape (*secret.shape, k) with
        coeffs[..., 0] == secret.

    Raises
    ------
    ValueError
        If k < 1, coefficient_bound < 0, the modulus is not a valid
        prime, or the secret does not fit the field.

    Warns
    -----
    RuntimeWarning
        If a real-valued secret has a half-precision dtype.
    """
    _check_threshold(k)

    if modulus is None and not isinstance(secret, Tensor):
        secret = torch.as_tensor(secret, dtype=torch.float64)
    else:
        secret = torch.as_tensor(secret)

    if modulus is not None:
        field_check_modulus(modulus)

        if secret.dtype.is_floating_point or secret.dtype.is_complex:
            raise ValueError(
                f"Secrets shared in GF(p) must be integers, got {secret.dtype}"
            )
        if torch.any((secret < 0) | (secret >= modulus)):
            raise ValueError(f"Secret must lie in [0, {modulus})")

        secret = secret.to(torch.int64)
        randomness = torch.randint(
            0,
            modulus,
            secret.shape + (k - 1,),
            dtype=torch.int64,
            device=secret.device,
            generator=generator,
        )
    else:
        if coefficient_bound < 0:
            raise ValueError(
                f"coefficient_bound must be non-negative, "
                f"got {coefficient_bound}"
            )

        if not secret.dtype.is_floating_point:
            secret = secret.to(torch.float64)
        if secret.dtype in _LOW_PRECISION_DTYPES:
            warnings.warn(
                f"Sharing a {secret.dtype} secret over the reals loses "
                f"precision quickly as k grows. Consider float32 or float64.",
                RuntimeWarning,
                stacklevel=2,
            )

        randomness = torch.randint(
            -coefficient_bound,
            coefficient_bound + 1,
            secret.shape + (k - 1,),
            device=secret.device,
            generator=generator,
        ).to(secret.dtype)

    coeffs = torch.cat([secret.unsqueeze(-1), randomness], dim=-1)

    return polynomial(coeffs)


def shamir_shares(
    p: Polynomial,
    x: Tensor,
    *,
    modulus: Optional[int] = None,
) -> Shares:
    """Evaluate a secret polynomial at the participants' x-coordinates.

    Parameters
    ----------
    p : Polynomial
        Secret polynomial, coefficients shape (*secret_shape, k).
    x : Tensor
        Distinct, nonzero share x-coordinates, shape (n,).
    modulus : int, optional
        Prime p for GF(p) evaluation.

    Returns
    -------
    Shares
        n shares with y of shape (n, *secret_shape).

    Warns
    -----
    RuntimeWarning
        If real-valued shares grow past the range where their dtype
        represents every integer exactly.
    """
    if modulus is not None:
        field_check_modulus(modulus)
    _check_share_x(x, modulus)

    if modulus is not None:
        y = field_evaluate(p, x, modulus)
    else:
        y = polynomial_evaluate(p, x)
        limit = _EXACT_INTEGER_LIMITS.get(y.dtype)
        if limit is not None and y.numel() > 0 and y.abs().max() > limit:
            warnings.warn(
                f"Share values exceed {limit}, beyond which {y.dtype} cannot "
                f"represent every integer. Reconstruction will be inexact; "
                f"consider float64.",
                RuntimeWarning,
                stacklevel=2,
            )

    # (*secret_shape, n) -> (n, *secret_shape)
    y = y.movedim(-1, 0)

    return Shares(x=x, y=y, batch_size=[x.shape[0]])


def shamir_split(
    secret: Union[Tensor, float, int],
    n: int,
    k: int,
    *,
    x: Optional[Tensor] = None,
    modulus: Optional[int] = None,
    coefficient_bound: int = 10,
    generator: Optional[torch.Generator] = None,
) -> Shares:
    """Split a secret into n shares using Shamir's Secret Sharing.

    Any k shares reconstruct the secret, while k-1 shares are consistent
    with every secret.

    Parameters
    ----------
    secret : Tensor or number
        Secret value(s), any shape.
    n : int
        Number of shares to generate.
    k : int
        Threshold - minimum shares needed to reconstruct.
    x : Tensor, optional
        Share x-coordinates, shape (n,). Defaults to 1, 2, ..., n.
    modulus : int, optional
        Prime p. Share in GF(p) instead of over the reals.
    coefficient_bound : int
        Real domain only, see :func:`shamir_polynomial`.
    generator : torch.Generator, optional
        Random number generator for reproducibility.

    Returns
    -------
    Shares
        n shares with x of shape (n,) and y of shape (n, *secret.shape).

    Examples
    --------
    >>> secret = torch.tensor(42, dtype=torch.int64)
    >>> shares = shamir_split(secret, 5, 3, modulus=2**31 - 1)
    >>> shamir_reconstruct(shares[:3], 3, modulus=2**31 - 1)
    tensor(42)
    """
    _check_threshold(k)
    if n < k:
        raise ValueError(f"n must be at least k, got n={n}, k={k}")

    p = shamir_polynomial(
        secret,
        k,
        modulus=modulus,
        coefficient_bound=coefficient_bound,
        generator=generator,
    )

    if x is None:
        if modulus is not None and n >= modulus:
            raise ValueError(
                f"GF({modulus}) has only {modulus - 1} nonzero points, "
                f"cannot issue {n} shares"
            )
        x = torch.arange(
            1,
            n + 1,
            dtype=p.coeffs.dtype,
            device=p.coeffs.device,
        )
    elif x.shape != (n,):
        raise ValueError(
            f"x must have shape ({n},), got {tuple(x.shape)}"
        )

    return shamir_shares(p, x, modulus=modulus)


def shamir_reconstruct(
    shares: Shares,
    k: int,
    *,
    modulus: Optional[int] = None,
) -> Tensor:
    """Reconstruct a secret from at least k Shamir shares.

    Evaluates the Lagrange interpolating polynomial of the shares at
    x = 0. Every given share is used; with shares from one polynomial
    any subset of size >= k yields the same secret.

    Parameters
    ----------
    shares : Shares
        At least k shares.
    k : int
        Threshold the shares were issued with.
    modulus : int, optional
        Prime p the shares were issued in.

    Returns
    -------
    Tensor
        Reconstructed secret, shape (*secret_shape,).

    Raises
    ------
    InsufficientSharesError
        If fewer than k shares are given.
    ValueError
        If share x-coordinates are zero or repeated.
    """
    _check_shares(shares, k, modulus)

    if modulus is not None:
        zero = torch.zeros((), dtype=torch.int64, device=shares.x.device)
        return field_lagrange_interpolate(shares.x, shares.y, zero, modulus)

    zero = torch.zeros((), dtype=shares.x.dtype, device=shares.x.device)
    return lagrange_interpolate(shares.x, shares.y, zero)


def shamir_recover_polynomial(
    shares: Shares,
    k: int,
    *,
    modulus: Optional[int] = None,
) -> Polynomial:
    """Recover every coefficient of the secret polynomial.

    Uses the first k shares. Over the reals this is an exact
    degree k - 1 fit; in GF(p) the Lagrange basis polynomials are
    expanded into power-basis coefficients mod p.

    Parameters
    ----------
    shares : Shares
        At least k shares.
    k : int
        Threshold the shares were issued with.
    modulus : int, optional
        Prime p the shares were issued in.

    Returns
    -------
    Polynomial
        Coefficients of shape (*secret_shape, k).

    Raises
    ------
    InsufficientSharesError
        If fewer than k shares are given.
    """
    _check_shares(shares, k, modulus)

    x = shares.x[:k]
    y = shares.y[:k]

    if modulus is None:
        dtype = torch.promote_types(x.dtype, y.dtype)
        if not dtype.is_floating_point:
            dtype = torch.get_default_dtype()
        return polynomial_fit(x.to(dtype), y.to(dtype), degree=k - 1)

    value_shape = y.shape[1:]
    xs = torch.remainder(x.to(torch.int64), modulus)
    ys = torch.remainder(y.to(torch.int64), modulus).reshape(k, -1)

    coeffs = torch.zeros(ys.shape[-1], k, dtype=torch.int64, device=xs.device)
    for j in range(k):
        # basis_j(x) = prod_{m != j} (x - x_m) / (x_j - x_m)
        basis = torch.zeros(k, dtype=torch.int64, device=xs.device)
        basis[0] = 1
        denominator = torch.ones((), dtype=torch.int64, device=xs.device)
        for m in range(k):
            if m == j:
                continue
            shifted = torch.cat([basis.new_zeros(1), basis[:-1]])
            basis = torch.remainder(
                shifted - torch.remainder(xs[m] * basis, modulus), modulus
            )
            denominator = torch.remainder(
                denominator * (xs[j] - xs[m]), modulus
            )

        basis = torch.remainder(
            basis * field_inverse(denominator, modulus), modulus
        )
        term = torch.remainder(ys[j].unsqueeze(-1) * basis, modulus)
        coeffs = torch.remainder(coeffs + term, modulus)

    return polynomial(coeffs.reshape(value_shape + (k,)))
