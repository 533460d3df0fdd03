import torch
from torch import Tensor

from torchshamir.polynomial import Polynomial

from ._modulus import _as_residues


def field_evaluate(p: Polynomial, x: Tensor, modulus: int) -> Tensor:
    """Evaluate polynomial over GF(p) using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with integer coefficients, shape (...batch, N).
    x : Tensor
        Integer evaluation points, shape (...x_batch).
    modulus : int
        Prime modulus p.

    Returns
    -------
    Tensor
        p(x) mod p as int64, shape (...batch, ...x_batch).
    """
    coeffs = _as_residues(p.coeffs, modulus, "coefficients")

    batch_shape = coeffs.shape[:-1]
    x_shape = x.shape
    N = coeffs.shape[-1]

    coeffs_flat = coeffs.reshape(-1, N).unsqueeze(-1)
    x_flat = _as_residues(x, modulus, "x").reshape(1, -1)

    result = coeffs_flat[:, N - 1].expand(-1, x_flat.shape[-1])
    for i in range(N - 2, -1, -1):
        result = torch.remainder(result * x_flat + coeffs_flat[:, i], modulus)

    return result.reshape(batch_shape + x_shape)
