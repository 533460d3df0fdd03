import math

from ._polynomial import Polynomial
from ._polynomial_error import PolynomialError

_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


def _format_magnitude(value: float) -> str:
    if math.isclose(value, round(value)):
        return str(int(round(value)))
    return f"{value:g}"


def polynomial_format(p: Polynomial, variable: str = "x") -> str:
    """Render a single polynomial as a legend label.

    Terms are written in descending powers with Unicode superscript
    exponents. Zero terms are dropped and unit coefficients are implied.

    Parameters
    ----------
    p : Polynomial
        Unbatched polynomial, coefficients shape (N,).
    variable : str
        Name of the indeterminate.

    Returns
    -------
    str
        Label such as ``"2x³ - 3x² + 2x + 5"``.

    Raises
    ------
    PolynomialError
        If p is batched.

    Examples
    --------
    >>> polynomial_format(polynomial(torch.tensor([5.0, 2.0, -3.0, 2.0])))
    '2x³ - 3x² + 2x + 5'
    >>> polynomial_format(polynomial(torch.tensor([0.0, 0.0, 1.0])))
    'x²'
    """
    if p.coeffs.dim() != 1:
        raise PolynomialError(
            f"Only a single polynomial can be formatted, "
            f"got coefficients of shape {tuple(p.coeffs.shape)}"
        )

    terms = []
    for power, value in reversed(list(enumerate(p.coeffs.tolist()))):
        if value == 0:
            continue

        magnitude = _format_magnitude(abs(value))
        if power == 0:
            term = magnitude
        else:
            term = "" if magnitude == "1" else magnitude
            term += variable
            if power > 1:
                term += str(power).translate(_SUPERSCRIPTS)

        if not terms:
            terms.append(f"-{term}" if value < 0 else term)
        else:
            terms.append(f"- {term}" if value < 0 else f"+ {term}")

    if not terms:
        return "0"

    return " ".join(terms)
