import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> Tensor:
    """Return degree of polynomial(s).

    Parameters
    ----------
    p : Polynomial
        Input polynomial, coefficients shape (...batch, N).

    Returns
    -------
    Tensor
        N - 1 for every polynomial, int64 with shape (...batch).

    Notes
    -----
    This is the formal degree. A Shamir polynomial drawn for threshold k
    always has formal degree k - 1, even when its leading coefficient
    happens to be zero.
    """
    coeffs = p.coeffs
    return torch.full(
        coeffs.shape[:-1],
        coeffs.shape[-1] - 1,
        dtype=torch.int64,
        device=coeffs.device,
    )
