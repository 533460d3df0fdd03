from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import torch
from torch import Tensor

from torchshamir.cryptography import Shares, shamir_shares
from torchshamir.polynomial import (
    DEFAULT_STEP,
    polynomial_evaluate,
    polynomial_format,
    polynomial_sample,
)

from ._chart import Chart, chart_polynomial

Y_LABEL_COUNT = 5
SHARES_LABEL = "Shares"
SECRET_LABEL = "Secret"


def _format_coordinate(value: float) -> str:
    text = f"{value:.7g}"
    if not any(c in text for c in ".ein"):
        text += ".0"
    return text


def _format_point(x: float, y: float) -> str:
    return f"({_format_coordinate(x)}, {_format_coordinate(y)})"


@dataclass
class ChartCoordinates:
    """Everything needed to draw a chart, in data coordinates.

    Attributes
    ----------
    title : str
        Chart caption.
    dimensions : tuple of int
        Image (width, height) in pixels.
    x_range, y_range : tuple of float
        Axis limits.
    label : str
        Legend label of the curve, e.g. ``"2x³ - 3x² + 2x + 5"``.
    curve_x, curve_y : Tensor
        Sampled curve, shape (M,) each.
    shares : Shares
        Marked shares.
    secret : Tensor or None
        The point (0, p(0)), shape (2,), when the chart shows the secret.
    axis : Tensor
        Vertical line through x = 0 spanning y_range, shape (2, 2).
    x_label_count : int
        One x tick label per marked point.
    y_label_count : int
        Number of y tick labels.
    share_label, secret_label : str
        Legend entries of the share and secret series.
    share_annotations : list of str
        Text drawn next to each share, e.g. ``"(-2.0, -27.0)"``.
    secret_annotation : str or None
        Text drawn next to the secret point.
    """

    title: str
    dimensions: Tuple[int, int]
    x_range: Tuple[float, float]
    y_range: Tuple[float, float]
    label: str
    curve_x: Tensor
    curve_y: Tensor
    shares: Shares
    secret: Optional[Tensor]
    axis: Tensor
    x_label_count: int
    y_label_count: int = Y_LABEL_COUNT
    share_label: str = SHARES_LABEL
    secret_label: str = SECRET_LABEL
    share_annotations: List[str] = field(default_factory=list)
    secret_annotation: Optional[str] = None


def chart_coordinates(
    chart: Chart,
    *,
    step: float = DEFAULT_STEP,
    dtype: torch.dtype = torch.float32,
) -> ChartCoordinates:
    """Compute the curve, share and secret coordinates of a chart.

    Parameters
    ----------
    chart : Chart
        Figure description.
    step : float
        Curve sampling step along x.
    dtype : torch.dtype
        Floating dtype of all coordinates.

    Returns
    -------
    ChartCoordinates
    """
    p = chart_polynomial(chart, dtype=dtype)

    curve_x, curve_y = polynomial_sample(
        p, chart.x_range[0], chart.x_range[1], step, dtype=dtype
    )

    shares = shamir_shares(p, torch.tensor(chart.share_x, dtype=dtype))

    secret = None
    if chart.secret:
        zero = torch.zeros((), dtype=dtype)
        secret = torch.stack([zero, polynomial_evaluate(p, zero)])

    axis = torch.tensor(
        [[0.0, chart.y_range[0]], [0.0, chart.y_range[1]]], dtype=dtype
    )

    return ChartCoordinates(
        title=chart.title,
        dimensions=chart.dimensions,
        x_range=chart.x_range,
        y_range=chart.y_range,
        label=polynomial_format(p),
        curve_x=curve_x,
        curve_y=curve_y,
        shares=shares,
        secret=secret,
        axis=axis,
        x_label_count=len(chart.share_x) + int(chart.secret),
        share_annotations=[
            _format_point(x, y)
            for x, y in zip(shares.x.tolist(), shares.y.tolist())
        ],
        secret_annotation=(
            None if secret is None else _format_point(*secret.tolist())
        ),
    )
