"""Native messaging framing over the standard streams.

Each message, in both directions, is
    4-byte unsigned little-endian length, then that many bytes of UTF-8 JSON
"""

from __future__ import annotations

import struct
import sys
import threading
from typing import Any, BinaryIO, Optional

from .. import json
from .base import FramingError, Transport, TransportClosed


_HEADER = struct.Struct('<I')


def encode_frame(message: Any) -> bytes:
    """Encode one message (anything with a ``to_dict()``, or plain JSON data)."""

    if hasattr(message, 'to_dict'):
        message = message.to_dict()

    payload = json.dumps(message)
    return _HEADER.pack(len(payload)) + payload


def _read_exactly(reader: BinaryIO, length: int) -> bytes:

    chunks = list()
    remaining = length

    while remaining > 0:
        chunk = reader.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)

    return b''.join(chunks)


class StdioTransport(Transport):
    """Length-prefixed JSON messages over a pair of binary streams, by
    default the process's own standard input and output.
    """

    def __init__(self, reader: Optional[BinaryIO] = None, writer: Optional[BinaryIO] = None):

        if reader is None:
            reader = sys.stdin.buffer
        if writer is None:
            writer = sys.stdout.buffer

        self.reader = reader
        self.writer = writer

        # Responses are written from several worker threads; without the
        # lock the bytes of two frames can and will get mixed together.

        self.lock = threading.Lock()

    def read(self) -> Any:

        header = _read_exactly(self.reader, _HEADER.size)

        if header == b'':
            raise TransportClosed('end of input stream')
        if len(header) != _HEADER.size:
            raise FramingError(f"truncated length prefix: {len(header)} bytes")

        length, = _HEADER.unpack(header)
        payload = _read_exactly(self.reader, length)

        if len(payload) != length:
            raise FramingError(f"truncated message: expected {length} bytes, got {len(payload)}")

        try:
            return json.loads(payload)
        except json.DecodeError as e:
            raise FramingError(f"undecodable message: {e}")

    def write(self, message: Any) -> None:

        frame = encode_frame(message)

        self.lock.acquire()
        try:
            self.writer.write(frame)
            self.writer.flush()
        finally:
            self.lock.release()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
