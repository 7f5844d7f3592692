"""Design primitives: responsive breakpoint scale."""

from .responsive import (  # noqa: F401
    Breakpoint,
    BreakpointRange,
    BreakpointResolver,
    list_breakpoints,
    get_breakpoint,
    classify_width,
)
