"""Transport layer implementations."""

from .base import (
    Transport,
    TransportError,
    TransportClosed,
    FramingError,
)

from .stdio import StdioTransport

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
