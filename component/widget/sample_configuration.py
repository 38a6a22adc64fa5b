"""Sample configuration widget.

This module provides the UI for the sampling parameters shared by all strata:
the confidence level and the maximum error, entered as e².
"""

import logging

import solara

from component.model import app_state
from component.scripts.calc_utils import get_z_score
from component.scripts.parameter import CONFIDENCE_LEVELS

logger = logging.getLogger("strata.sample_configuration")


@solara.component
def SampleConfiguration():
    """Sample configuration widget for the right panel."""
    with solara.Column():
        ConfidenceLevelSelector()
        MaxErrorInput()


@solara.component
def ConfidenceLevelSelector():
    """One button per supported confidence level."""
    current_level = app_state.confidence_level.value

    def make_select_callback(level):
        def select_level():
            try:
                app_state.set_confidence_level(level)
            except (ValueError, TypeError) as e:
                app_state.add_error(f"Invalid confidence level: {str(e)}")

        return select_level

    solara.Text("Confidence Level", style="font-weight: 500;")
    with solara.Column(gap="6px", style="margin-bottom: 12px;"):
        for level in CONFIDENCE_LEVELS:
            solara.Button(
                f"{level}% (Z = {get_z_score(level)})",
                on_click=make_select_callback(level),
                color="primary" if level == current_level else None,
                outlined=level != current_level,
                block=True,
            )


@solara.component
def MaxErrorInput():
    """Text field editing e² directly."""

    def update_max_error_squared(value):
        app_state.set_max_error_squared(value)
        logger.debug("e² set to %s", app_state.max_error_squared.value)

    solara.v.TextField(
        label="Maximum Error (e²)",
        v_model=app_state.max_error_squared.value,
        on_v_model=update_max_error_squared,
        type="number",
        min=0,
        step=1000,
        hint="Squared margin of error, e.g. 25000",
        persistent_hint=True,
    )
