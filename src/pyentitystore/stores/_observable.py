"""Minimal change notification shared by every store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

_logger = logging.getLogger(__name__)

Listener = Callable[[Any, str], None]
"""Called as ``listener(store, attribute)`` after *attribute* changed."""


class Observable:
    """Mixin keeping a list of change listeners.

    Views subscribe once and re-read whichever attribute they are told
    changed. Notification is synchronous and happens after the new value
    is in place.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, attribute: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(self, attribute)
            except Exception:
                _logger.exception("Listener %r failed while handling %r", listener, attribute)
