from torchshamir.chart._blog_charts import BLOG_CHARTS
from torchshamir.chart._chart import DEFAULT_DIMENSIONS, Chart, chart_polynomial
from torchshamir.chart._chart_coordinates import (
    ChartCoordinates,
    chart_coordinates,
)

__all__ = [
    "BLOG_CHARTS",
    "Chart",
    "ChartCoordinates",
    "DEFAULT_DIMENSIONS",
    "chart_coordinates",
    "chart_polynomial",
]
