import solara

from component.model import app_state
from component.widget.custom_widgets import message_list


@solara.component
def Tools():
    """Input errors raised by the editors, and the calculator reset."""
    errors = app_state.error_messages.value

    with solara.Card("Tools"):
        if errors:
            solara.Text(
                f"{len(errors)} input error(s)",
                style="font-weight: 500;",
            )
            message_list(errors)
            solara.Button(
                "Clear Errors",
                on_click=app_state.clear_errors,
                color="secondary",
                text=True,
            )

        solara.Button(
            "Reset to example strata",
            on_click=app_state.reset_state,
            color="warning",
            outlined=True,
            block=True,
        )
