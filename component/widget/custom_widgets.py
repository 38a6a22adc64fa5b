"""Small Solara helpers shared by the StrataSize panels."""

from typing import Iterable

import solara
from solara.alias import rv

NO_DATA_LABEL = "N/A"


def error_display(error_message: str, error_type: str = "error") -> None:
    """Show a message in a dense alert.

    Args:
        error_message: Message to display
        error_type: Alert type (error, warning, info)
    """
    with rv.Alert(type=error_type, text=True, dense=True):
        solara.Markdown(f"**{error_type.title()}:** {error_message}")


def message_list(messages: Iterable[str], error_type: str = "error") -> None:
    for message in messages:
        error_display(message, error_type)


def help_details(title: str, content: str) -> None:
    """Collapsed markdown help text."""
    with solara.Details(title):
        solara.Markdown(content)


def stat_chip(label: str, value=None) -> None:
    """Small outlined chip, showing N/A when the value is missing."""
    text = NO_DATA_LABEL if value is None else value
    solara.v.Chip(
        small=True,
        label=True,
        outlined=True,
        children=[f"{label}: {text}"],
    )
