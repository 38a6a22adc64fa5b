import solara

from component.model import app_state
from component.scripts.variance import summarize_values
from component.widget.custom_widgets import stat_chip


@solara.component
def VarianceHelper():
    """Derive a variance from raw observations.

    The result is only displayed, it is up to the user to copy it into a stratum.
    """
    summary = summarize_values(app_state.variance_data.value)

    with solara.Column():
        solara.v.Textarea(
            label="Observations (comma separated)",
            v_model=app_state.variance_data.value,
            on_v_model=app_state.set_variance_data,
            rows=3,
            auto_grow=True,
            hint="Each value is read up to its first non-numeric character",
        )

        with solara.Row(gap="4px", style="flex-wrap: wrap;"):
            stat_chip("values", summary.count)
            stat_chip("mean", f"{summary.mean:.4f}")
            stat_chip("S²", f"{summary.variance:.4f}")
