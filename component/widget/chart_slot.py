"""Holder that keeps at most one live chart widget."""

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger("strata.widget.chart_slot")


class ChartSlot:
    """Owns the chart widget of one view.

    acquire() closes the current widget before building the next one, and
    release() closes it for good when the view goes away.
    """

    def __init__(self, factory: Callable[..., Any]):
        self._factory = factory
        self.widget: Optional[Any] = None
        self.generation = 0

    @property
    def is_live(self) -> bool:
        return self.widget is not None

    def acquire(self, **kwargs) -> Any:
        """Release the current widget, then build and hold a new one."""
        self.release()
        self.widget = self._factory(**kwargs)
        self.generation += 1
        logger.debug("Chart acquired (generation %s)", self.generation)
        return self.widget

    def release(self):
        """Close the current widget, if any."""
        if self.widget is None:
            return

        widget, self.widget = self.widget, None
        widget.close()
        logger.debug("Chart released (generation %s)", self.generation)
