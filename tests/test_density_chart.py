import pytest
import solara

from component.scripts.density import density_series
from component.widget import density_chart
from component.widget.density_chart import DensityChart, build_density_option
from component.widget.echarts import EChartsWidget


@pytest.fixture
def charts(monkeypatch):
    """Charts built by DensityChart, in creation order."""
    created = []

    class RecordingChart(EChartsWidget):
        def __init__(self, **kwargs):
            super().__init__(**kwargs)
            self.closed = False
            created.append(self)

        def close(self):
            self.closed = True
            super().close()

    monkeypatch.setattr(density_chart, "EChartsWidget", RecordingChart)
    return created


def test_option_has_curve_and_region_series():
    curve, region, z_score = density_series(95)

    option = build_density_option(curve, region, 95, z_score)

    curve_line, region_line = option.series
    assert curve_line.name == "Normal distribution"
    assert region_line.name == "Confidence region (95%)"
    assert len(curve_line.data) == 101
    assert len(region_line.data) == 49
    assert region_line.data[0][0] >= -1.96
    assert region_line.data[-1][0] <= 1.96
    assert option.title.text == "Z = ±1.96"


def test_redraw_closes_previous_chart(charts):
    level = solara.reactive(95)

    @solara.component
    def Page():
        DensityChart(confidence_level=level.value)

    box, rc = solara.render(Page(), handle_error=False)

    assert len(charts) == 1
    assert rc.find(EChartsWidget).widget is charts[0]

    level.value = 99

    assert len(charts) == 2
    assert charts[0].closed
    assert not charts[1].closed
    assert rc.find(EChartsWidget).widget is charts[1]

    level.value = 90
    assert [chart.closed for chart in charts] == [True, True, False]

    rc.close()
    assert all(chart.closed for chart in charts)


def test_same_level_keeps_chart(charts):
    level = solara.reactive(95)
    title = solara.reactive("a")

    @solara.component
    def Page():
        solara.Text(title.value)
        DensityChart(confidence_level=level.value)

    box, rc = solara.render(Page(), handle_error=False)
    title.value = "b"

    assert len(charts) == 1
    assert not charts[0].closed
    rc.close()
