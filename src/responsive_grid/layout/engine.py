"""Grid layout engine.

Computes column count and uniform cell width for a container width, then
emits one placement per item. The engine is a pure transformation: it keeps no
state between calls, never mutates its inputs, and identical arguments always
produce an equal ``LayoutResult``. Hosts call it again on every width change.

Cell width
----------
``available = total_width - 2 * padding - column_spacing * (columns - 1)``
``cell_width = available / columns``

The result is not clamped. Padding or spacing larger than the container yields
a zero or negative cell width; that is a caller configuration problem and is
reported as-is rather than hidden.

Placements are filled sequentially, wrapping every ``column_count`` items, so
``row, column = divmod(index, column_count)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from responsive_grid.design.responsive import Breakpoint, BreakpointResolver
from .configuration import GridConfiguration
from .errors import ConfigurationError

__all__ = [
    "GridCellPlacement",
    "LayoutResult",
    "GridLayoutEngine",
    "compute_cell_width",
]

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(frozen=True)
class GridCellPlacement:
    """Per-item output of one layout pass.

    ``item`` is ``None`` when the layout was computed from a bare count.
    """

    index: int
    cell_width: float
    row: int
    column: int
    item: Any = None


@dataclass(frozen=True)
class LayoutResult:
    breakpoint: Breakpoint
    column_count: int
    cell_width: float
    placements: Tuple[GridCellPlacement, ...]
    row_spacing: float
    column_spacing: float
    padding: float

    @property
    def item_count(self) -> int:
        return len(self.placements)

    @property
    def row_count(self) -> int:
        return -(-len(self.placements) // self.column_count)


def compute_cell_width(total_width: float, column_count: int, config: GridConfiguration) -> float:
    available = total_width - 2 * config.padding - config.column_spacing * (column_count - 1)
    return available / column_count


class GridLayoutEngine:
    """Stateless layout calculator bound to a breakpoint resolver."""

    def __init__(
        self,
        resolver: Optional[BreakpointResolver] = None,
        config: Optional[GridConfiguration] = None,
    ) -> None:
        self._resolver = resolver or BreakpointResolver()
        self._default_config = config or GridConfiguration()

    @property
    def resolver(self) -> BreakpointResolver:
        return self._resolver

    @property
    def default_config(self) -> GridConfiguration:
        return self._default_config

    def column_count(self, breakpoint: Breakpoint, config: GridConfiguration) -> int:
        count = config.columns_for(breakpoint)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ConfigurationError(
                f"Column count for breakpoint '{breakpoint.value}' must be a positive integer "
                f"(got {count!r})",
                context={"breakpoint": breakpoint.value, "column_count": count},
            )
        return count

    def layout(
        self,
        item_count: int,
        total_width: float,
        config: Optional[GridConfiguration] = None,
    ) -> LayoutResult:
        if item_count < 0:
            raise ValueError("item_count must be non-negative")
        return self._compute(total_width, config, [None] * item_count)

    def arrange(
        self,
        items: Sequence[Any],
        total_width: float,
        config: Optional[GridConfiguration] = None,
    ) -> LayoutResult:
        """Like ``layout`` but each placement references its source item."""
        return self._compute(total_width, config, items)

    def render(
        self,
        items: Sequence[Any],
        total_width: float,
        cell: Callable[[GridCellPlacement], R],
        config: Optional[GridConfiguration] = None,
    ) -> List[R]:
        """Invoke ``cell`` once per item in index order and collect the results."""
        result = self.arrange(items, total_width, config)
        return [cell(p) for p in result.placements]

    def _compute(
        self,
        total_width: float,
        config: Optional[GridConfiguration],
        items: Sequence[Any],
    ) -> LayoutResult:
        cfg = config or self._default_config
        breakpoint = self._resolver.resolve(total_width)
        columns = self.column_count(breakpoint, cfg)
        cell_width = compute_cell_width(total_width, columns, cfg)
        placements = tuple(
            GridCellPlacement(
                index=i,
                cell_width=cell_width,
                row=i // columns,
                column=i % columns,
                item=item,
            )
            for i, item in enumerate(items)
        )
        logger.debug(
            "grid layout width=%s breakpoint=%s columns=%d cell_width=%s items=%d",
            total_width,
            breakpoint.value,
            columns,
            cell_width,
            len(placements),
        )
        return LayoutResult(
            breakpoint=breakpoint,
            column_count=columns,
            cell_width=cell_width,
            placements=placements,
            row_spacing=cfg.row_spacing,
            column_spacing=cfg.column_spacing,
            padding=cfg.padding,
        )
