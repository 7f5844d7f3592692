"""Grid reflow coordinator (PyQt6 host adapter).

Connects widget resize notifications to the grid layout engine. Rapid resize
bursts (user dragging a window corner) are collected and a single layout is
committed per widget after a quiet period, computed on the latest width.

Each commit:
 - runs ``GridLayoutEngine.arrange`` over the watched item sequence
 - hands the ``LayoutResult`` to the widget's callback
 - publishes ``GridEvent.LAYOUT_CHANGED`` on the EventBus, plus
   ``GridEvent.BREAKPOINT_CHANGED`` when the breakpoint differs from the
   previous commit for that widget

A resize-driven commit is skipped when neither the width nor the item count
changed since the last one; ``invalidate`` always recomputes. Invisible widgets stay unprocessed until shown and resized
again. Rendering stays with the host: the callback receives numbers only.

Tests drive ``force_commit`` instead of waiting for the timer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Tuple

from PyQt6.QtCore import QEvent, QObject, QTimer
from PyQt6.QtWidgets import QWidget

from responsive_grid.config.settings import (
    DEFAULT_REFLOW_DEBOUNCE_MS,
    MAX_REFLOW_DEBOUNCE_MS,
    MIN_REFLOW_DEBOUNCE_MS,
)
from responsive_grid.layout import GridConfiguration, GridLayoutEngine, LayoutError, LayoutResult
from .event_bus import EventBus, GridEvent

__all__ = ["GridReflowCoordinator"]

logger = logging.getLogger(__name__)


def _clamp_debounce(ms: int) -> int:
    return max(MIN_REFLOW_DEBOUNCE_MS, min(ms, MAX_REFLOW_DEBOUNCE_MS))


@dataclass
class _Watched:
    widget: QWidget
    items: Sequence[Any]
    callback: Callable[[LayoutResult], None]
    config: Optional[GridConfiguration] = None
    last_key: Optional[Tuple[int, int]] = None
    last_result: Optional[LayoutResult] = None


class GridReflowCoordinator(QObject):
    """Debounce resize-induced grid layouts for watched widgets."""

    def __init__(
        self,
        engine: Optional[GridLayoutEngine] = None,
        bus: Optional[EventBus] = None,
        debounce_ms: int = DEFAULT_REFLOW_DEBOUNCE_MS,
    ):
        super().__init__()
        self._engine = engine or GridLayoutEngine()
        self._bus = bus
        self._debounce_ms = _clamp_debounce(debounce_ms)
        self._watched: Dict[int, _Watched] = {}
        self._dirty_ids: Set[int] = set()
        self._timer: Optional[QTimer] = None
        self._errors: List[Tuple[QWidget, Exception]] = []

    # Configuration -----------------------------------------------------
    def set_debounce_ms(self, ms: int) -> None:
        self._debounce_ms = _clamp_debounce(ms)

    @property
    def debounce_ms(self) -> int:
        return self._debounce_ms

    # Registration ------------------------------------------------------
    def watch(
        self,
        widget: QWidget,
        items: Sequence[Any],
        callback: Callable[[LayoutResult], None],
        config: Optional[GridConfiguration] = None,
    ) -> None:
        """Start tracking ``widget`` and commit its initial layout immediately."""
        wid = id(widget)
        if wid in self._watched:
            return
        watched = _Watched(widget=widget, items=items, callback=callback, config=config)
        self._watched[wid] = watched
        widget.installEventFilter(self)
        self._commit(watched)

    def unwatch(self, widget: QWidget) -> None:
        wid = id(widget)
        if self._watched.pop(wid, None) is not None:
            widget.removeEventFilter(self)
        self._dirty_ids.discard(wid)

    def invalidate(self, widget: QWidget) -> None:
        """Schedule a commit for ``widget`` (e.g. after its items changed).

        Unlike resize-driven commits, an explicit invalidation always
        recomputes, even when width and item count are unchanged.
        """
        wid = id(widget)
        watched = self._watched.get(wid)
        if watched is not None:
            watched.last_key = None
            self._dirty_ids.add(wid)
            self._schedule()

    # Introspection -----------------------------------------------------
    def pending_count(self) -> int:
        return len(self._dirty_ids)

    def last_result(self, widget: QWidget) -> Optional[LayoutResult]:
        watched = self._watched.get(id(widget))
        return watched.last_result if watched else None

    @property
    def errors(self) -> List[Tuple[QWidget, Exception]]:
        return list(self._errors)

    # Control -----------------------------------------------------------
    def force_commit(self) -> None:
        if self._dirty_ids:
            self._flush()

    # Internal ----------------------------------------------------------
    def _schedule(self) -> None:
        if self._timer is None:
            self._timer = QTimer(self)
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self._on_timeout)  # type: ignore[attr-defined]
        self._timer.start(self._debounce_ms)

    def _on_timeout(self):  # pragma: no cover - timer deterministic via force_commit in tests
        self._flush()

    def _flush(self) -> None:
        dirty = list(self._dirty_ids)
        self._dirty_ids.clear()
        if self._timer:
            self._timer.stop()
            self._timer = None
        for wid in dirty:
            watched = self._watched.get(wid)
            if watched is not None:
                self._commit(watched)

    def _commit(self, watched: _Watched) -> None:
        w = watched.widget
        if not w.isVisible():
            return
        width = w.width()
        items = list(watched.items)
        key = (width, len(items))
        if key == watched.last_key:
            return
        try:
            result = self._engine.arrange(items, width, watched.config)
        except LayoutError as exc:
            logger.exception("Grid layout failed for width %s", width)
            self._errors.append((w, exc))
            return
        previous = watched.last_result
        watched.last_key = key
        watched.last_result = result
        try:
            watched.callback(result)
        except Exception as exc:  # noqa: BLE001 - one failing view must not block others
            logger.exception("Grid layout callback failed")
            self._errors.append((w, exc))
        self._publish(w, width, previous, result)

    def _publish(
        self,
        widget: QWidget,
        width: int,
        previous: Optional[LayoutResult],
        result: LayoutResult,
    ) -> None:
        if self._bus is None:
            return
        self._bus.publish(
            GridEvent.LAYOUT_CHANGED,
            {
                "widget": widget,
                "width": width,
                "breakpoint": result.breakpoint.value,
                "column_count": result.column_count,
                "cell_width": result.cell_width,
                "item_count": result.item_count,
            },
        )
        if previous is None or previous.breakpoint is not result.breakpoint:
            self._bus.publish(
                GridEvent.BREAKPOINT_CHANGED,
                {
                    "widget": widget,
                    "previous": previous.breakpoint.value if previous else None,
                    "current": result.breakpoint.value,
                },
            )

    # Qt Event Filter ---------------------------------------------------
    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802
        if isinstance(obj, QWidget) and event.type() == QEvent.Type.Resize:
            wid = id(obj)
            if wid in self._watched:
                self._dirty_ids.add(wid)
                self._schedule()
        return super().eventFilter(obj, event)
