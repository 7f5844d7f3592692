"""Responsive grid layout engine."""

from .errors import LayoutError, ConfigurationError  # noqa: F401
from .configuration import GridConfiguration, default_columns  # noqa: F401
from .engine import (  # noqa: F401
    GridCellPlacement,
    GridLayoutEngine,
    LayoutResult,
    compute_cell_width,
)
