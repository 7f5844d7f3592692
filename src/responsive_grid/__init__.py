"""Responsive grid: breakpoint-driven column count and cell sizing."""

from .design.responsive import (  # noqa: F401
    Breakpoint,
    BreakpointRange,
    BreakpointResolver,
    classify_width,
    get_breakpoint,
    list_breakpoints,
)
from .layout import (  # noqa: F401
    ConfigurationError,
    GridCellPlacement,
    GridConfiguration,
    GridLayoutEngine,
    LayoutError,
    LayoutResult,
    compute_cell_width,
)

__version__ = "0.1.0"
