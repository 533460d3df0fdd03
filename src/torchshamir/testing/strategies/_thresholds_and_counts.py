from typing import Tuple

import hypothesis.strategies


@hypothesis.strategies.composite
def thresholds_and_counts(
    draw: hypothesis.strategies.DrawFn,
    min_threshold: int = 1,
    max_threshold: int = 8,
    max_extra_shares: int = 4,
) -> Tuple[int, int]:
    """Strategy for a threshold k and a share count n >= k."""
    k = draw(
        hypothesis.strategies.integers(
            min_value=min_threshold, max_value=max_threshold
        )
    )
    n = k + draw(
        hypothesis.strategies.integers(min_value=0, max_value=max_extra_shares)
    )
    return k, n
