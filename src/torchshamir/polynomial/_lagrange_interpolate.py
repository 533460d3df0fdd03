import torch
from torch import Tensor


def lagrange_interpolate(x_nodes: Tensor, y_nodes: Tensor, x: Tensor) -> Tensor:
    """Evaluate the Lagrange interpolating polynomial through nodes.

    Computes

        L(x) = sum_j y_j * prod_{m != j} (x - x_m) / (x_j - x_m)

    which is the unique polynomial of degree at most n - 1 passing through
    the n nodes. At x = 0 this recovers the constant term, i.e. the secret
    of a Shamir polynomial.

    Parameters
    ----------
    x_nodes : Tensor
        Node x-coordinates, shape (n,). Must be distinct.
    y_nodes : Tensor
        Node values, shape (n,) or (n, *value_shape).
    x : Tensor
        Query points, any shape.

    Returns
    -------
    Tensor
        Interpolated values, shape (*x.shape, *value_shape).

    Raises
    ------
    ValueError
        If there are no nodes, the node counts disagree, or two nodes
        share an x-coordinate.

    Examples
    --------
    >>> x_nodes = torch.tensor([1.0, 2.0, 3.0])
    >>> y_nodes = x_nodes**2
    >>> lagrange_interpolate(x_nodes, y_nodes, torch.tensor(0.0))
    tensor(0.)
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

    dtype = torch.promote_types(
        torch.promote_types(x_nodes.dtype, y_nodes.dtype), x.dtype
    )
    if not dtype.is_floating_point:
        dtype = torch.get_default_dtype()

    x_nodes = x_nodes.to(dtype)
    y_flat = y_nodes.to(dtype).reshape(n, -1)
    x_flat = x.to(dtype).reshape(-1)

    eye = torch.eye(n, dtype=torch.bool, device=x_nodes.device)

    # diff[j, m] = x_j - x_m
    diff = x_nodes.unsqueeze(-1) - x_nodes.unsqueeze(0)
    if torch.any((diff == 0) & ~eye):
        raise ValueError("Interpolation nodes must have distinct x-coordinates")

    # terms[q, j, m] = (x_q - x_m) / (x_j - x_m), diagonal excluded
    numerator = (x_flat.view(-1, 1, 1) - x_nodes.view(1, 1, n)).expand(
        -1, n, n
    )
    terms = numerator / diff.masked_fill(eye, 1.0)
    basis = terms.masked_fill(eye, 1.0).prod(dim=-1)  # (M, n)

    result = basis @ y_flat  # (M, prod(value_shape))

    return result.reshape(x.shape + y_nodes.shape[1:])
