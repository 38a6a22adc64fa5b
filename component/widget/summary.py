import math

import pandas as pd
import solara
from ipecharts.option import Legend, Option, Title, Tooltip
from ipecharts.option.series import Pie

from component.model import app_state
from component.sampling import SamplingResults, SamplingService
from component.scripts.calc_utils import get_z_score
from component.scripts.parameter import chart_colors
from component.scripts.stratified import (
    calculate_allocation_summary,
    format_e_squared,
    format_proportion,
)
from component.widget.custom_widgets import (
    error_display,
    help_details,
    message_list,
    stat_chip,
)
from component.widget.density_chart import DensityChart
from component.widget.echarts import EChartsWidget

FORMULA_HELP = r"""
n = ⌈(Z · Σ Nᵢ·Sᵢ / (e · Σ Nᵢ))²⌉

Each stratum receives round(n · Nᵢ / N) samples. Strata are rounded on
their own, so the allocations may not add up exactly to n.
"""


@solara.component
def Summary(theme_toggle=None):
    """Results panel: sample size and its allocation across strata."""
    # Recomputed on every render from the current state
    results = SamplingService.calculate_from_state(app_state)

    with solara.Column():
        statistics_summary(results)

        message_list(results.warnings, "warning")

        if not results.success:
            error_display(results.error_message or "No data", "info")
        else:
            allocation_table(results)
            allocation_pie_chart(results, theme_toggle=theme_toggle)

        help_details("How is n computed?", FORMULA_HELP)


@solara.component
def NormalDistribution(theme_toggle=None):
    """Density curve for the selected confidence level."""
    confidence_level = app_state.confidence_level.value

    with solara.Column():
        DensityChart(confidence_level=confidence_level, theme_toggle=theme_toggle)
        solara.Text(
            f"Z = {get_z_score(confidence_level)} for {confidence_level}% confidence",
            style="color: #666; font-size: 0.9em;",
        )


def statistics_summary(results: SamplingResults) -> None:
    """Display summary statistics as chips."""
    with solara.Row(gap="4px", style="flex-wrap: wrap;"):
        stat_chip("n", results.total_samples)
        stat_chip("e²", format_e_squared(results.max_error_squared))
        stat_chip("Z", results.z_score)
        stat_chip("N", f"{results.total_population:,}")

        if results.success and results.rounding_drift:
            stat_chip(
                "Allocated",
                f"{results.allocated_total} ({results.rounding_drift:+d})",
            )


def allocation_table(results: SamplingResults) -> None:
    """Display the per-stratum allocation."""
    solara.HTML(tag="div", style="height: 12px;")

    allocation_df = pd.DataFrame(
        [
            {
                "name": alloc.name,
                "population": alloc.population,
                "samples": alloc.samples,
                "proportion": alloc.proportion,
            }
            for alloc in results.samples_per_stratum
        ]
    )

    solara.DataFrame(calculate_allocation_summary(allocation_df), items_per_page=20)


def allocation_pie_chart(results: SamplingResults, theme_toggle=None) -> None:
    """Pie chart showing how the sample is shared between strata."""
    pie_data = [
        {
            "value": alloc.samples,
            "name": f"{alloc.name} ({format_proportion(alloc.proportion)})",
        }
        for alloc in results.samples_per_stratum
        if alloc.samples > 0 and math.isfinite(alloc.proportion)
    ]

    if not pie_data:
        return

    pie = Pie(
        data=pie_data,
        radius=[50, 100],
        itemStyle={"borderRadius": 5, "borderColor": "#fff", "borderWidth": 2},
        label={"show": False, "position": "center"},
        emphasis={
            "label": {
                "show": True,
                "fontSize": 12,
            }
        },
    )

    option = Option(
        backgroundColor="#1e1e1e00",
        legend=Legend(bottom=0),
        series=[pie],
        color=chart_colors,
        tooltip=Tooltip(trigger="item"),
        title=Title(
            text="Sample by Stratum",
            left="center",
            textStyle={"fontSize": 13, "fontWeight": "normal"},
        ),
    )

    EChartsWidget.element(
        option=option,
        style={"height": "340px", "width": "100%"},
        theme_toggle=theme_toggle,
    )
