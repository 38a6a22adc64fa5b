"""Standard normal density chart with the confidence region highlighted."""

import logging

import pandas as pd
import solara
from ipecharts.option import Grid, Legend, Option, Title, Tooltip, XAxis, YAxis
from ipecharts.option.series import Line

from component.scripts.density import density_series
from component.widget.chart_slot import ChartSlot
from component.widget.echarts import EChartsWidget

logger = logging.getLogger("strata.widget.density_chart")


def _points(df: pd.DataFrame):
    return [[round(x, 4), round(y, 6)] for x, y in zip(df["x"], df["y"])]


def build_density_option(
    curve: pd.DataFrame, region: pd.DataFrame, confidence_level, z_score: float
) -> Option:
    """Build the ECharts option for the density curve and its confidence region."""
    curve_line = Line(
        name="Normal distribution",
        data=_points(curve),
        showSymbol=False,
        lineStyle={"color": "rgb(59, 130, 246)", "width": 2},
        itemStyle={"color": "rgb(59, 130, 246)"},
        areaStyle={"color": "rgba(59, 130, 246, 0.1)"},
    )

    region_line = Line(
        name=f"Confidence region ({confidence_level}%)",
        data=_points(region),
        showSymbol=False,
        lineStyle={"color": "rgba(59, 130, 246, 0.5)", "width": 1},
        itemStyle={"color": "rgba(59, 130, 246, 0.5)"},
        areaStyle={"color": "rgba(59, 130, 246, 0.3)"},
    )

    return Option(
        backgroundColor="#1e1e1e00",
        title=Title(
            text=f"Z = ±{z_score}",
            left="center",
            textStyle={"fontSize": 11, "fontWeight": "normal"},
        ),
        legend=Legend(bottom=0),
        xAxis=XAxis(
            type="value",
            name="Standard deviations (σ)",
            nameLocation="middle",
            nameGap=25,
            min=float(curve["x"].min()),
            max=float(curve["x"].max()),
            nameTextStyle={"fontSize": 11},
        ),
        yAxis=YAxis(
            type="value",
            name="Density",
            nameLocation="middle",
            nameGap=35,
            min=0,
            nameTextStyle={"fontSize": 11},
        ),
        series=[curve_line, region_line],
        tooltip=Tooltip(show=False),
        grid=Grid(left="15%", right="6%", top="15%", bottom="22%"),
    )


@solara.component
def DensityChart(confidence_level, theme_toggle=None):
    """Density chart redrawn from scratch whenever the confidence level changes.

    The previous chart is closed before the next one is built and the last one
    is closed when the component unmounts.
    """
    slot = solara.use_memo(lambda: ChartSlot(EChartsWidget), [])

    def draw():
        curve, region, z_score = density_series(confidence_level)
        logger.debug(
            "Drawing density chart for %s%% (%s of %s points in region)",
            confidence_level,
            len(region),
            len(curve),
        )
        return slot.acquire(
            option=build_density_option(curve, region, confidence_level, z_score),
            theme_toggle=theme_toggle,
            style={"height": "260px", "width": "100%"},
        )

    chart = solara.use_memo(draw, [confidence_level])

    solara.use_effect(lambda: slot.release, [])

    solara.Div(children=[chart])
