import torch
from torch import Tensor


def polynomial_vandermonde(x: Tensor, degree: int) -> Tensor:
    """Construct Vandermonde matrix for polynomial fitting.

    Parameters
    ----------
    x : Tensor
        Sample points, shape (n_points,).
    degree : int
        Maximum polynomial degree.

    Returns
    -------
    Tensor
        Vandermonde matrix, shape (n_points, degree + 1).
        V[i, j] = x[i]^j (ascending powers).

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> polynomial_vandermonde(x, 2)
    tensor([[1., 1., 1.],
            [1., 2., 4.],
            [1., 3., 9.]])
    """
    n = x.shape[0]
    ones = torch.ones(n, 1, dtype=x.dtype, device=x.device)

    # Column j is x**j as a running product, exact for integer x
    powers = x.unsqueeze(-1).expand(n, degree).cumprod(dim=-1)

    return torch.cat([ones, powers], dim=-1)
