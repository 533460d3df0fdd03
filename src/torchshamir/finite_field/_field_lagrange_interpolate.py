import torch
from torch import Tensor

from ._field_arithmetic import field_inverse
from ._modulus import _as_residues


def field_lagrange_interpolate(
    x_nodes: Tensor,
    y_nodes: Tensor,
    x: Tensor,
    modulus: int,
) -> Tensor:
    """Lagrange interpolation over GF(p).

    Products are reduced after every multiplication so intermediate
    values stay below 2**62.

    Parameters
    ----------
    x_nodes : Tensor
        Integer node x-coordinates, shape (n,). Must be distinct mod p.
    y_nodes : Tensor
        Integer node values, shape (n,) or (n, *value_shape).
    x : Tensor
        Integer query points, any shape.
    modulus : int
        Prime modulus p.

    Returns
    -------
    Tensor
        Interpolated values as int64, shape (*x.shape, *value_shape).

    Raises
    ------
    ValueError
        If there are no nodes, the node counts disagree, or two nodes
        coincide mod p.
    """
    if x_nodes.dim() != 1:
        raise ValueError(
            f"x_nodes must be 1-dimensional, got shape {tuple(x_nodes.shape)}"
        )
    n = x_nodes.shape[0]
    if n == 0:
        raise ValueError("At least one node is required for interpolation")
    if y_nodes.shape[0] != n:
        raise ValueError(
            f"x_nodes and y_nodes must have the same length, "
            f"got {n} and {y_nodes.shape[0]}"
        )

    xs = _as_residues(x_nodes, modulus, "x_nodes")
    ys = _as_residues(y_nodes, modulus, "y_nodes").reshape(n, -1)
    xq = _as_residues(x, modulus, "x").reshape(-1, 1)

    eye = torch.eye(n, dtype=torch.bool, device=xs.device)
    diff = torch.remainder(xs.unsqueeze(-1) - xs.unsqueeze(0), modulus)
    if torch.any((diff == 0) & ~eye):
        raise ValueError(
            "Interpolation nodes must have distinct x-coordinates mod p"
        )

    numerator = torch.ones(xq.shape[0], n, dtype=torch.int64, device=xs.device)
    denominator = torch.ones(n, dtype=torch.int64, device=xs.device)
    for m in range(n):
        factor = torch.remainder(xq - xs[m], modulus).expand(-1, n)
        factor = factor.masked_fill(eye[m], 1)
        numerator = torch.remainder(numerator * factor, modulus)
        denominator = torch.remainder(
            denominator * diff[:, m].masked_fill(eye[m], 1), modulus
        )

    basis = torch.remainder(
        numerator * field_inverse(denominator, modulus), modulus
    )  # (M, n)

    result = torch.zeros(
        xq.shape[0], ys.shape[-1], dtype=torch.int64, device=xs.device
    )
    for j in range(n):
        term = torch.remainder(basis[:, j : j + 1] * ys[j], modulus)
        result = torch.remainder(result + term, modulus)

    return result.reshape(x.shape + y_nodes.shape[1:])
