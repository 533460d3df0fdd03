from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class Shares:
    """A set of Shamir shares.

    Share i is the point (x[i], y[i]) on the secret polynomial. The batch
    dimension is the share dimension, so indexing selects a subset:

        shares[:3]                      # first three shares
        shares[torch.tensor([0, 2])]    # shares 0 and 2

    Attributes
    ----------
    x : Tensor
        Share x-coordinates, shape (n,). Distinct and nonzero.
    y : Tensor
        Polynomial values at x, shape (n, *secret_shape).
    """

    x: Tensor
    y: Tensor
