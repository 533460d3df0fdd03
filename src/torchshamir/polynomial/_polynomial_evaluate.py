import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Tensor) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch).

    Returns
    -------
    Tensor
        Values p(x), shape (...batch, ...x_batch).

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    coeffs = p.coeffs

    batch_shape = coeffs.shape[:-1]
    x_shape = x.shape
    N = coeffs.shape[-1]

    # Promote to common dtype so integer points work with float coefficients
    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)

    # (...batch, N) -> (B, N, 1) and (...x_batch) -> (1, M)
    coeffs_flat = coeffs.reshape(-1, N).to(common_dtype).unsqueeze(-1)
    x_flat = x.reshape(1, -1).to(common_dtype)

    result = coeffs_flat[:, N - 1].expand(-1, x_flat.shape[-1])
    for i in range(N - 2, -1, -1):
        result = result * x_flat + coeffs_flat[:, i]

    return result.reshape(batch_shape + x_shape)
