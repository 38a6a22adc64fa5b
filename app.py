"""StrataSize: stratified sample size calculator.

A Solara web application: the strata table and results on the left, the
normal distribution chart and sampling parameters on the right.
"""

import solara
from sepal_ui.sepalwidgets.vue_app import ThemeToggle
from sepal_ui.solara import setup_solara_server, setup_theme_colors
from solara.lab.components.theming import theme

from component.scripts.logger import setup_logging
from component.tile.strata_editor import StrataEditor
from component.tile.variance_helper import VarianceHelper
from component.widget.sample_configuration import SampleConfiguration
from component.widget.summary import NormalDistribution, Summary
from component.widget.tools import Tools

logger = setup_logging()
logger.debug("StrataSize app initialized")
logger.debug("Solara version: %s", solara.__version__)

setup_solara_server()


def create_theme_toggle():
    theme_toggle = ThemeToggle()
    theme_toggle.observe(lambda e: setattr(theme, "dark", e["new"]), "dark")
    return theme_toggle


@solara.component
def Page():
    """Main calculator page."""
    setup_theme_colors()
    theme_toggle = solara.use_memo(create_theme_toggle, [])

    solara.Title("StrataSize")
    with solara.AppBarTitle():
        solara.Text("StrataSize - Stratified Sample Size")
    with solara.AppBar():
        solara.display(theme_toggle)

    with solara.Columns([2, 1], gutters=True):
        with solara.Column():
            with solara.Card():
                StrataEditor()

            with solara.Card("Sampling Results"):
                Summary(theme_toggle=theme_toggle)

        with solara.Column():
            with solara.Card("Normal Distribution"):
                NormalDistribution(theme_toggle=theme_toggle)

            with solara.Card("Sampling Parameters"):
                SampleConfiguration()

            with solara.Card("Variance Helper"):
                VarianceHelper()

            Tools()


# Routes for the application
routes = [
    solara.Route(path="/", component=Page, label="StrataSize"),
]
