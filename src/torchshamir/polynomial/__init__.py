from ._degree_error import DegreeError
from ._lagrange_interpolate import lagrange_interpolate
from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_error import PolynomialError
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_fit import polynomial_fit
from ._polynomial_format import polynomial_format
from ._polynomial_sample import DEFAULT_STEP, polynomial_sample
from ._polynomial_vandermonde import polynomial_vandermonde

__all__ = [
    "DEFAULT_STEP",
    "DegreeError",
    "Polynomial",
    "PolynomialError",
    "lagrange_interpolate",
    "polynomial",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_fit",
    "polynomial_format",
    "polynomial_sample",
    "polynomial_vandermonde",
]
