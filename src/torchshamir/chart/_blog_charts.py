"""Figures of the Shamir's Secret Sharing blog post."""

from ._chart import Chart

# 2x³ - 3x² + 2x + 5, secret 5
_SHAMIR_COEFFS = (5.0, 2.0, -3.0, 2.0)

BLOG_CHARTS = {
    chart.name: chart
    for chart in (
        Chart(
            name="line",
            title="Two Points are Uniquely Determined by a Line",
            x_range=(2.5, 4.5),
            y_range=(2.0, 4.5),
            coeffs=(0.0, 1.0),
            share_x=(3.0, 4.0),
        ),
        Chart(
            name="quadratic",
            title="Three Points are Uniquely Determined by a Parabola",
            x_range=(-5.1, 5.1),
            y_range=(-1.0, 26.0),
            coeffs=(0.0, 0.0, 1.0),
            share_x=(-4.0, 1.0, 4.0),
        ),
        Chart(
            name="cubic",
            title="Four Points are Uniquely Determined by a Cubic",
            x_range=(-2.5, 2.5),
            y_range=(-20.0, 20.0),
            coeffs=(0.0, 0.0, 0.0, 1.0),
            share_x=(-2.0, -1.0, 1.0, 2.0),
        ),
        Chart(
            name="shamir",
            title="Shamir's Secret Sharing",
            x_range=(-2.1, 2.4),
            y_range=(-30.0, 20.0),
            coeffs=_SHAMIR_COEFFS,
            share_x=(-2.0, -1.0, 1.0, 2.0),
            secret=True,
        ),
        Chart(
            name="shamir_alternate_single",
            title="Shamir's Secret Sharing: Alternate Single Share",
            x_range=(-1.1, 3.4),
            y_range=(-30.0, 60.0),
            coeffs=_SHAMIR_COEFFS,
            share_x=(-1.0, 1.0, 2.0, 3.0),
            secret=True,
        ),
        Chart(
            name="shamir_alternate_multiple",
            title="Shamir's Secret Sharing: Alternate Multiple Shares",
            x_range=(-2.7, 3.0),
            y_range=(-70.0, 60.0),
            coeffs=_SHAMIR_COEFFS,
            share_x=(-2.5, -1.5, 1.5, 2.5),
            secret=True,
        ),
    )
}
