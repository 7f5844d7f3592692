"""Synchronous event bus for grid layout notifications.

Layout producers (the reflow coordinator) publish here; host views subscribe
to learn about fresh layouts and breakpoint transitions without holding a
reference to the producer.

A failing handler never interrupts the publish cycle: its exception is
recorded in ``errors`` and logged, and the remaining handlers still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "GridEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

logger = logging.getLogger(__name__)


class GridEvent(str, Enum):
    LAYOUT_CHANGED = "grid_layout_changed"
    BREAKPOINT_CHANGED = "grid_breakpoint_changed"


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | GridEvent) -> str:
    return name.value if isinstance(name, GridEvent) else name


class EventBus:
    """Synchronous dispatcher.

    The subscriber table is guarded by a re-entrant lock; handlers run with
    the lock released so they may subscribe or unsubscribe recursively.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, Exception]] = []

    # Subscription management ------------------------------------------
    def subscribe(
        self, name: str | GridEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket and sub in bucket:
                bucket.remove(sub)
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # Publishing --------------------------------------------------------
    def publish(self, name: str | GridEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        finished: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                logger.warning("Handler for '%s' failed: %s", key, exc, exc_info=True)
                with self._lock:
                    self._errors.append((evt, exc))
            if sub.once:
                finished.append(sub)
        for sub in finished:
            self.unsubscribe(sub)
        return evt

    # Introspection -----------------------------------------------------
    def subscriber_count(self, name: str | GridEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, Exception]]:
        with self._lock:
            return list(self._errors)
