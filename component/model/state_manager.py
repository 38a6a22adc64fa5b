"""StrataSize State Management Module.

Contains reactive state management for the calculator. AppState owns the only
mutable copy of the strata table and sampling parameters; every derived value
is recomputed from a snapshot of it.
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple

import solara

from component.sampling.types import Stratum
from component.scripts.calc_utils import (
    coerce_max_error_squared,
    coerce_population,
    coerce_variance,
)
from component.scripts.parameter import (
    CONFIDENCE_LEVELS,
    DEFAULT_CONFIDENCE_LEVEL,
    DEFAULT_MAX_ERROR_SQUARED,
    DEFAULT_STRATA,
    STRATUM_NAME_TEMPLATE,
)

logger = logging.getLogger("strata.state")

EDITABLE_FIELDS = ("name", "population", "variance")


def default_strata() -> Tuple[Stratum, ...]:
    """Build the initial strata table, ids starting at 1."""
    return tuple(
        Stratum(id=idx, name=name, population=population, variance=variance)
        for idx, (name, population, variance) in enumerate(DEFAULT_STRATA, start=1)
    )


class AppState:
    """Centralized state management for the calculator using Solara reactive variables."""

    def __init__(self):
        initial_strata = default_strata()

        # Strata table, in display order
        self.strata = solara.reactive(initial_strata)
        # Next id to hand out, never reused within a session
        self._next_id = len(initial_strata) + 1

        # Sample calculation parameters
        self.confidence_level = solara.reactive(DEFAULT_CONFIDENCE_LEVEL)
        # e² is stored, e is derived when computing
        self.max_error_squared = solara.reactive(DEFAULT_MAX_ERROR_SQUARED)

        # Variance helper input
        self.variance_data = solara.reactive("")

        # UI state
        self.error_messages = solara.reactive([])

    def _take_id(self) -> int:
        stratum_id = self._next_id
        self._next_id += 1
        return stratum_id

    def get_stratum(self, stratum_id: int) -> Stratum:
        """Return the stratum with the given id.

        Raises:
            KeyError: If no stratum has this id
        """
        for stratum in self.strata.value:
            if stratum.id == stratum_id:
                return stratum
        raise KeyError(f"Unknown stratum id: {stratum_id}")

    def add_stratum(self, name: Optional[str] = None) -> Stratum:
        """Append a stratum with population 0 and variance 0.

        The default name is labelled by the new row position.
        """
        strata = self.strata.value
        if name is None:
            name = STRATUM_NAME_TEMPLATE.format(len(strata) + 1)

        stratum = Stratum(
            id=self._take_id(),
            name=name,
            population=0,
            variance=0.0,
        )
        self.strata.value = strata + (stratum,)
        logger.debug("Added stratum %s", stratum)
        return stratum

    def remove_stratum(self, stratum_id: int):
        """Remove the stratum with the given id, keeping the order of the others.

        Raises:
            KeyError: If no stratum has this id
        """
        self.get_stratum(stratum_id)
        self.strata.value = tuple(s for s in self.strata.value if s.id != stratum_id)
        logger.debug("Removed stratum %s", stratum_id)

    def update_stratum(self, stratum_id: int, field: str, value):
        """Update one field of a stratum.

        Numeric fields are coerced: invalid input becomes 0.

        Args:
            stratum_id: Id of the stratum to edit
            field: 'name', 'population' or 'variance'
            value: Raw value from the input widget

        Raises:
            KeyError: If no stratum has this id
            ValueError: If field is not editable
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field must be one of: {', '.join(EDITABLE_FIELDS)}")

        self.get_stratum(stratum_id)

        if field == "population":
            value = coerce_population(value)
        elif field == "variance":
            value = coerce_variance(value)
        else:
            value = "" if value is None else str(value)

        self.strata.value = tuple(
            replace(s, **{field: value}) if s.id == stratum_id else s
            for s in self.strata.value
        )

    def set_confidence_level(self, confidence_level):
        """Update the confidence level.

        Raises:
            ValueError: If the level is not 90, 95 or 99
        """
        if confidence_level not in CONFIDENCE_LEVELS:
            raise ValueError(
                "Confidence level must be one of: "
                + ", ".join(str(level) for level in CONFIDENCE_LEVELS)
            )
        self.confidence_level.value = int(confidence_level)

    def set_max_error_squared(self, value):
        """Update e² from raw input, invalid input becomes 0."""
        self.max_error_squared.value = coerce_max_error_squared(value)

    def set_variance_data(self, data: Optional[str]):
        """Update the variance helper text."""
        self.variance_data.value = data or ""

    def add_error(self, error_message: str):
        """Add error message to the list."""
        current_errors = self.error_messages.value.copy()
        current_errors.append(error_message)
        self.error_messages.value = current_errors

    def clear_errors(self):
        """Clear all error messages."""
        self.error_messages.value = []

    def reset_state(self):
        """Restore the default strata and parameters.

        Ids keep counting from where they were so no earlier id comes back.
        """
        self.strata.value = tuple(
            replace(stratum, id=self._take_id()) for stratum in default_strata()
        )
        self.confidence_level.value = DEFAULT_CONFIDENCE_LEVEL
        self.max_error_squared.value = DEFAULT_MAX_ERROR_SQUARED
        self.variance_data.value = ""
        self.error_messages.value = []
        logger.info("Application state reset")


app_state = AppState()
