"""Responsive breakpoints for the grid layout.

Six named breakpoints partition container width into contiguous half-open
ranges. The scale targets handheld through desktop widths:

 - xs:  < 375px           (small phones)
 - sm:  >=375 & < 414px   (standard phones)
 - md:  >=414 & < 768px   (large phones, small tablets)
 - lg:  >=768 & < 1024px  (portrait tablets)
 - xl:  >=1024 & < 1366px (landscape tablets, small desktops)
 - xxl: >=1366px          (large desktops)

Width comparisons are inclusive on the lower bound and exclusive on the upper
bound; the final tier is open ended. Resolution is total: negative widths map
to the lowest breakpoint, and a width no range contains (NaN, or a custom
breakpoint set with gaps) falls back to the last breakpoint of the set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

__all__ = [
    "Breakpoint",
    "BreakpointRange",
    "BreakpointResolver",
    "list_breakpoints",
    "get_breakpoint",
    "classify_width",
]

logger = logging.getLogger(__name__)


class Breakpoint(str, Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"

    @property
    def range(self) -> "BreakpointRange":
        return _RANGES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


@dataclass(frozen=True)
class BreakpointRange:
    """Half-open width interval ``[min_width, max_width)``.

    ``max_width`` of ``None`` denotes the open-ended final tier.
    """

    min_width: float
    max_width: Optional[float] = None

    def contains(self, width: float) -> bool:
        if self.max_width is None:
            return width >= self.min_width
        return self.min_width <= width < self.max_width


_RANGES: Dict[Breakpoint, BreakpointRange] = {
    Breakpoint.XS: BreakpointRange(0, 375),
    Breakpoint.SM: BreakpointRange(375, 414),
    Breakpoint.MD: BreakpointRange(414, 768),
    Breakpoint.LG: BreakpointRange(768, 1024),
    Breakpoint.XL: BreakpointRange(1024, 1366),
    Breakpoint.XXL: BreakpointRange(1366, None),
}

_DESCRIPTIONS: Dict[Breakpoint, str] = {
    Breakpoint.XS: "Small phones (iPhone SE class).",
    Breakpoint.SM: "Standard phones.",
    Breakpoint.MD: "Large phones and small tablets.",
    Breakpoint.LG: "Tablets in portrait orientation.",
    Breakpoint.XL: "Tablets in landscape orientation and small desktops.",
    Breakpoint.XXL: "Large desktop windows.",
}


class BreakpointResolver:
    """Map a container width to a breakpoint.

    The resolver scans ``scale`` in order and returns the first breakpoint
    whose range contains the width. ``scale`` defaults to the six standard
    breakpoints in ascending order.

    Negative widths resolve to the first entry of the scale. A width no range
    contains resolves to the last entry of the scale, which is XXL only for
    the default scale; a custom scale falls back to whatever it lists last.
    """

    def __init__(
        self, scale: Optional[Iterable[Tuple[Breakpoint, BreakpointRange]]] = None
    ) -> None:
        if scale is None:
            scale = ((bp, _RANGES[bp]) for bp in Breakpoint)
        self._scale: Tuple[Tuple[Breakpoint, BreakpointRange], ...] = tuple(scale)
        if not self._scale:
            raise ValueError("Breakpoint scale must not be empty")

    @property
    def scale(self) -> Sequence[Tuple[Breakpoint, BreakpointRange]]:
        return self._scale

    def resolve(self, width: float) -> Breakpoint:
        if width < 0:
            return self._scale[0][0]
        for bp, rng in self._scale:
            if rng.contains(width):
                return bp
        fallback = self._scale[-1][0]
        logger.warning("No breakpoint range contains width %r; using %s", width, fallback.value)
        return fallback


_DEFAULT_RESOLVER = BreakpointResolver()


def list_breakpoints() -> List[Breakpoint]:
    return sorted(Breakpoint, key=lambda b: b.range.min_width)


def get_breakpoint(bp_id: str) -> Breakpoint:
    try:
        return Breakpoint(bp_id)
    except ValueError:
        raise KeyError(f"Unknown breakpoint id: {bp_id}") from None


def classify_width(width: float) -> Breakpoint:
    """Return the standard Breakpoint matching the given width (pixels)."""
    return _DEFAULT_RESOLVER.resolve(width)
