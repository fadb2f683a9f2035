"""Transport interface.

This is the (small) contract a transport implementation follows. It lives
outside :mod:`exteditorr.protocol` so the protocol remains transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportClosed(TransportError):
    """The peer closed the stream at a message boundary."""


class FramingError(TransportError):
    """A message was truncated, or its content could not be decoded."""


class Transport(ABC):
    """Minimal contract for a message transport."""

    @abstractmethod
    def read(self) -> Any:
        """Block until one message is available, and return it decoded."""

    @abstractmethod
    def write(self, message: Any) -> None:
        """Send one message. Safe to call from multiple threads."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
