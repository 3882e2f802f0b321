"""Host collaborators: the Length primitive, display options and formatting.

The active host is a process-wide singleton. It defaults to a
``ReferenceHost`` built from settings; integrations replace it with
``set_host``.
"""

from __future__ import annotations

from typing import Optional, Protocol

from sketchunits.config import get_settings
from sketchunits.host.display import DisplayConfiguration, LengthFormat, LengthUnit
from sketchunits.host.length import Length
from sketchunits.host.reference import ReferenceHost


class Host(Protocol):
    def parse_length(self, text: str) -> Length:
        """Parse a length string; raise ExternalParseFailure on bad input."""
        ...

    def format_length(self, length: float) -> str:
        """Format a length given in inches. Backs ``str(Length)``."""
        ...

    def format_area(self, value: float) -> str:
        """Format an area given in square inches."""
        ...

    def display_options(self) -> DisplayConfiguration:
        ...


_host: Optional[Host] = None


def get_host() -> Host:
    """Get the active host, creating the reference host on first use."""
    global _host
    if _host is None:
        _host = ReferenceHost.from_settings(get_settings())
    return _host


def set_host(host: Host) -> None:
    global _host
    _host = host


def reset_host() -> None:
    """Drop the active host (for testing)."""
    global _host
    _host = None


__all__ = [
    "DisplayConfiguration",
    "Host",
    "Length",
    "LengthFormat",
    "LengthUnit",
    "ReferenceHost",
    "get_host",
    "reset_host",
    "set_host",
]
