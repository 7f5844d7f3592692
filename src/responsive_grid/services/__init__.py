"""Host-facing services (event bus, Qt reflow coordinator).

The Qt coordinator is imported from its own module so the event bus stays
usable without a Qt platform.
"""

from .event_bus import EventBus, GridEvent  # noqa: F401
