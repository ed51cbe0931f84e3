"""Failure-isolating cell, for listeners that must not starve each other."""

from __future__ import annotations

import logging

from cellx.cell import Cell, Listener, T

logger = logging.getLogger("cellx.isolated")


class IsolatedCell(Cell[T]):
    """Cell whose listeners cannot starve each other.

    Same API as Cell. A listener that raises is logged and skipped;
    the rest of the notification still runs and set() returns normally.
    """

    __slots__ = ()

    def _notify(self, listeners: tuple[Listener[T], ...], value: T) -> None:
        for listener in listeners:
            try:
                listener(value)
            except Exception:
                logger.exception(
                    "Listener %s failed for value %r",
                    getattr(listener, "__name__", repr(listener)), value,
                )
