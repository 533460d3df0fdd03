from ._polynomial_error import PolynomialError


class DegreeError(PolynomialError, ValueError):
    """Raised when degree is invalid for operation."""

    pass
