from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[..., 0] + coeffs[..., 1]*x + coeffs[..., 2]*x^2 + ...

    For secret sharing, coeffs[..., 0] is the secret and the number of
    coefficients is the reconstruction threshold.

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N) where N = degree + 1.
        coeffs[..., i] is the coefficient of x^i.
        Batch dimensions come first, coefficient dimension last.

    Examples
    --------
    Single polynomial 5 + 2x - 3x^2 + 2x^3:
        Polynomial(coeffs=torch.tensor([5.0, 2.0, -3.0, 2.0]))

    Batch of 2 polynomials:
        Polynomial(coeffs=torch.tensor([[1.0, 2.0], [3.0, 4.0]]))
        # First: 1 + 2x, Second: 3 + 4x

    Evaluation:
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs: Tensor) -> Polynomial:
    """Create polynomial from coefficient tensor.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N).
        Must have at least one coefficient.

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is empty (size 0 in last dimension).

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    if coeffs.dim() == 0:
        raise PolynomialError(
            "Coefficients must have at least one dimension, got a scalar"
        )

    if coeffs.numel() == 0 or coeffs.shape[-1] == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Polynomial(coeffs=coeffs)
