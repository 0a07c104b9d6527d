"""Synchronous observer registration for clock notifications."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class Signal:
    """Ordered listener list; emit() calls every listener in connect order.

    A listener that raises is logged and skipped; the rest still run.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Listener] = []

    def connect(self, listener: Listener) -> Listener:
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def disconnect(self, listener: Listener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def emit(self, *args: Any) -> None:
        for listener in list(self._listeners):
            try:
                listener(*args)
            except Exception:
                logger.exception("Listener %r on %s failed", listener, self.name)

    def __len__(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, listeners={len(self._listeners)})"
