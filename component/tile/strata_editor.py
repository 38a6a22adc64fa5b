import logging

import solara

from component.model import app_state
from component.scripts.parameter import chart_colors

logger = logging.getLogger("strata.tile.strata_editor")


@solara.component
def StrataEditor():
    """Editable table of strata: name, population and variance per row."""
    strata = app_state.strata.value

    def make_update_callback(stratum_id, field):
        def update(value):
            try:
                app_state.update_stratum(stratum_id, field, value)
            except (KeyError, ValueError, TypeError) as e:
                app_state.add_error(f"Could not update stratum: {str(e)}")

        return update

    def make_remove_callback(stratum_id):
        def remove():
            try:
                app_state.remove_stratum(stratum_id)
            except KeyError as e:
                app_state.add_error(f"Could not remove stratum: {str(e)}")

        return remove

    with solara.Column():
        with solara.Row(justify="space-between", style="align-items: center;"):
            solara.Text("Strata", style="font-size: 1.2em; font-weight: 500;")
            solara.Button(
                "Add Stratum",
                icon_name="mdi-plus",
                on_click=lambda: app_state.add_stratum(),
                color="primary",
                small=True,
            )

        if not strata:
            solara.Warning("No strata defined. Add one to compute a sample size.")
            return

        for idx, stratum in enumerate(strata):
            color = chart_colors[idx % len(chart_colors)]

            # one card per stratum id
            with solara.Card(
                style=f"margin-bottom: 8px; padding: 12px; border-left: 8px solid {color};"
            ).key(f"stratum-{stratum.id}"):
                with solara.Row(justify="space-between", style="align-items: center;"):
                    with solara.Column(style="flex: 1 1 auto; margin: 0 8px;"):
                        solara.InputText(
                            label="Name",
                            value=stratum.name,
                            on_value=make_update_callback(stratum.id, "name"),
                            continuous_update=True,
                            style="min-width: 120px;",
                        )

                    with solara.Column(style="flex: 0 0 140px; margin: 0 8px;"):
                        solara.v.TextField(
                            label="Population (Nᵢ)",
                            v_model=stratum.population,
                            on_v_model=make_update_callback(stratum.id, "population"),
                            type="number",
                            min=0,
                            dense=True,
                        )

                    with solara.Column(style="flex: 0 0 140px; margin: 0 8px;"):
                        solara.v.TextField(
                            label="Variance (Sᵢ²)",
                            v_model=stratum.variance,
                            on_v_model=make_update_callback(stratum.id, "variance"),
                            type="number",
                            min=0,
                            dense=True,
                        )

                    with solara.Column(style="flex: 0 0 40px;"):
                        solara.Button(
                            icon_name="mdi-delete",
                            icon=True,
                            color="error",
                            on_click=make_remove_callback(stratum.id),
                        )
