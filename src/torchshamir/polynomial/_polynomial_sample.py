from typing import Optional, Tuple

import torch
from torch import Tensor

from ._polynomial import Polynomial
from ._polynomial_evaluate import polynomial_evaluate

DEFAULT_STEP = 1e-3


def polynomial_sample(
    p: Polynomial,
    start: float,
    stop: float,
    step: float = DEFAULT_STEP,
    dtype: Optional[torch.dtype] = None,
) -> Tuple[Tensor, Tensor]:
    """Sample a polynomial curve on a regular grid.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (...batch, N).
    start : float
        First x-coordinate.
    stop : float
        End of the range, exclusive.
    step : float
        Spacing between consecutive x-coordinates.
    dtype : torch.dtype, optional
        Dtype of the grid. Defaults to the coefficient dtype when it is
        floating point, else the default dtype.

    Returns
    -------
    x : Tensor
        Grid points start, start + step, ... < stop, shape (M,).
    y : Tensor
        Values p(x), shape (...batch, M).

    Raises
    ------
    ValueError
        If step is not positive or stop <= start.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if stop <= start:
        raise ValueError(
            f"stop must be greater than start, got start={start}, stop={stop}"
        )

    if dtype is None:
        dtype = (
            p.coeffs.dtype
            if p.coeffs.dtype.is_floating_point
            else torch.get_default_dtype()
        )

    x = torch.arange(start, stop, step, dtype=dtype, device=p.coeffs.device)

    return x, polynomial_evaluate(p, x)
