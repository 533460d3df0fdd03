from dataclasses import dataclass
from typing import Optional, Tuple

import torch

from torchshamir.polynomial import Polynomial, polynomial

DEFAULT_DIMENSIONS = (640, 480)


@dataclass(frozen=True)
class Chart:
    """Description of one figure: a polynomial, its shares and the secret.

    Attributes
    ----------
    name : str
        Identifier of the figure, e.g. ``"shamir"``.
    title : str
        Caption drawn above the plot.
    x_range : tuple of float
        Visible x-interval (start, stop). The curve is sampled on
        [start, stop).
    y_range : tuple of float
        Visible y-interval (bottom, top).
    coeffs : tuple of float
        Polynomial coefficients in ascending order.
    share_x : tuple of float
        x-coordinates of the shares to mark. Must be nonzero.
    secret : bool
        Whether to mark the secret at (0, p(0)).
    dimensions : tuple of int
        Image (width, height) in pixels.
    """

    name: str
    title: str
    x_range: Tuple[float, float]
    y_range: Tuple[float, float]
    coeffs: Tuple[float, ...]
    share_x: Tuple[float, ...]
    secret: bool = False
    dimensions: Tuple[int, int] = DEFAULT_DIMENSIONS

    def __post_init__(self):
        if self.x_range[0] >= self.x_range[1]:
            raise ValueError(
                f"x_range must be increasing, got {self.x_range}"
            )
        if self.y_range[0] >= self.y_range[1]:
            raise ValueError(
                f"y_range must be increasing, got {self.y_range}"
            )
        if len(self.coeffs) == 0:
            raise ValueError("Chart polynomial needs at least one coefficient")
        if self.dimensions[0] <= 0 or self.dimensions[1] <= 0:
            raise ValueError(
                f"dimensions must be positive, got {self.dimensions}"
            )
        if 0.0 in self.share_x:
            raise ValueError(
                "Share x-coordinates must be nonzero: x = 0 is the secret"
            )
        if len(set(self.share_x)) != len(self.share_x):
            raise ValueError(
                f"Share x-coordinates must be distinct, got {self.share_x}"
            )


def chart_polynomial(
    chart: Chart,
    dtype: Optional[torch.dtype] = None,
) -> Polynomial:
    """Return the polynomial drawn in a chart."""
    return polynomial(torch.tensor(chart.coeffs, dtype=dtype))
