import ipyvuetify as v
from ipecharts import EChartsWidget as BaseEChartsWidget


class EChartsWidget(BaseEChartsWidget):
    """ECharts widget following the light/dark theme of the app."""

    def __init__(self, theme_toggle=None, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.renderer = "svg"
        self.theme_toggle = theme_toggle
        self.theme = self.get_theme()

        self._theme_source().observe(self.set_theme, "dark")
        self._observing_theme = True

    def _theme_source(self):
        return self.theme_toggle if self.theme_toggle else v.theme

    def get_theme(self):
        return "dark" if getattr(self._theme_source(), "dark") else "light"

    def set_theme(self, _):
        self.theme = self.get_theme()

    def close(self):
        # the theme source outlives the chart
        if getattr(self, "_observing_theme", False):
            self._theme_source().unobserve(self.set_theme, "dark")
            self._observing_theme = False
        super().close()
