"""Exceptions for secret sharing."""


class InsufficientSharesError(ValueError):
    """Fewer shares than the threshold were supplied.

    Any k - 1 Shamir shares are consistent with every possible secret,
    so reconstruction from them is refused rather than returning an
    arbitrary value.
    """

    pass
