from ._field_arithmetic import (
    field_add,
    field_inverse,
    field_multiply,
    field_power,
    field_subtract,
)
from ._field_evaluate import field_evaluate
from ._field_lagrange_interpolate import field_lagrange_interpolate
from ._modulus import MERSENNE_PRIME_31, field_check_modulus

__all__ = [
    "MERSENNE_PRIME_31",
    "field_add",
    "field_check_modulus",
    "field_evaluate",
    "field_inverse",
    "field_lagrange_interpolate",
    "field_multiply",
    "field_power",
    "field_subtract",
]
