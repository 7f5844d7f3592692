"""Global defaults for grid layout and resize reflow."""

from __future__ import annotations

import logging
import os
from typing import Final, Mapping

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """Read an integer from the environment, keeping ``default`` when unset or malformed."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r; using %d", name, raw, default)
        return default


# Column counts per breakpoint id (xs..xxl)
DEFAULT_COLUMNS: Final[Mapping[str, int]] = {
    "xs": 3,
    "sm": 4,
    "md": 5,
    "lg": 6,
    "xl": 7,
    "xxl": 8,
}
FALLBACK_COLUMN_COUNT: Final = 1  # used when a breakpoint has no entry

DEFAULT_ROW_SPACING: Final = 1.0
DEFAULT_COLUMN_SPACING: Final = 1.0
DEFAULT_PADDING: Final = 0.0

MIN_REFLOW_DEBOUNCE_MS: Final = 10
MAX_REFLOW_DEBOUNCE_MS: Final = 2000
DEFAULT_REFLOW_DEBOUNCE_MS: Final = env_int("RESPONSIVE_GRID_REFLOW_DEBOUNCE_MS", 90)
