"""Hypothesis strategies for secret sharing tests."""

from ._field_moduli import field_moduli
from ._share_subsets import share_subsets
from ._thresholds_and_counts import thresholds_and_counts

__all__ = [
    "field_moduli",
    "share_subsets",
    "thresholds_and_counts",
]
