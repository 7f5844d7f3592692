"""Grid configuration value object.

Holds the per-breakpoint column counts plus row spacing, column spacing and
outer padding. Instances are immutable: the column mapping is copied into a
read-only view at construction, and ``with_overrides`` returns a new object.

Breakpoints missing from the column mapping resolve to a single column.
Column counts themselves are only validated when the layout engine uses them,
so a configuration may carry an unusable entry for a breakpoint it never hits.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping

from responsive_grid.config.settings import (
    DEFAULT_COLUMN_SPACING,
    DEFAULT_COLUMNS,
    DEFAULT_PADDING,
    DEFAULT_ROW_SPACING,
    FALLBACK_COLUMN_COUNT,
)
from responsive_grid.design.responsive import Breakpoint
from .errors import ConfigurationError

__all__ = ["GridConfiguration", "default_columns"]


def default_columns() -> Dict[Breakpoint, int]:
    return {Breakpoint(bp_id): count for bp_id, count in DEFAULT_COLUMNS.items()}


def _coerce_breakpoint(key: Any) -> Breakpoint:
    if isinstance(key, Breakpoint):
        return key
    try:
        return Breakpoint(key)
    except ValueError:
        raise ConfigurationError(
            f"Unknown breakpoint id in column mapping: {key!r}", context={"breakpoint": key}
        ) from None


@dataclass(frozen=True)
class GridConfiguration:
    """Layout parameters for a responsive grid.

    Attributes
    ----------
    columns_for_breakpoint: Mapping[Breakpoint, int]
        Column count per breakpoint. Keys may also be given as breakpoint id
        strings ("xs", "sm", ...).
    row_spacing: float
        Vertical gap between rows.
    column_spacing: float
        Horizontal gap between adjacent columns.
    padding: float
        Inset applied on both the leading and trailing edge.
    """

    columns_for_breakpoint: Mapping[Breakpoint, int] = field(default_factory=default_columns)
    row_spacing: float = DEFAULT_ROW_SPACING
    column_spacing: float = DEFAULT_COLUMN_SPACING
    padding: float = DEFAULT_PADDING

    def __post_init__(self) -> None:
        columns = {_coerce_breakpoint(k): v for k, v in self.columns_for_breakpoint.items()}
        object.__setattr__(self, "columns_for_breakpoint", MappingProxyType(columns))
        for name in ("row_spacing", "column_spacing", "padding"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(
                    f"{name} must be non-negative (got {value})", context={name: value}
                )

    def __hash__(self) -> int:
        columns = tuple(sorted((bp.value, n) for bp, n in self.columns_for_breakpoint.items()))
        return hash((columns, self.row_spacing, self.column_spacing, self.padding))

    def columns_for(self, breakpoint: Breakpoint) -> int:
        return self.columns_for_breakpoint.get(breakpoint, FALLBACK_COLUMN_COUNT)

    def with_overrides(self, **changes: Any) -> "GridConfiguration":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GridConfiguration":
        """Build a configuration from plain data.

        Recognised keys: ``columns`` (mapping of breakpoint id to count),
        ``row_spacing``, ``column_spacing`` and ``padding``. Omitted keys keep
        their defaults; a partial ``columns`` mapping replaces the default
        mapping entirely (missing breakpoints then use one column).
        """
        unknown = set(data) - {"columns", "row_spacing", "column_spacing", "padding"}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {sorted(unknown)}", context={"keys": sorted(unknown)}
            )
        kwargs: Dict[str, Any] = {}
        if "columns" in data:
            kwargs["columns_for_breakpoint"] = dict(data["columns"])
        for name in ("row_spacing", "column_spacing", "padding"):
            if name in data:
                kwargs[name] = float(data[name])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": {bp.value: n for bp, n in self.columns_for_breakpoint.items()},
            "row_spacing": self.row_spacing,
            "column_spacing": self.column_spacing,
            "padding": self.padding,
        }
