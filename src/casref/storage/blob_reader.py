"""
Bounded reads over closable byte sources.

A BlobReader owns its source and serves at most ``n`` bytes from it. When a
read observes end-of-data the source is released before the empty result is
returned, so callers that read to exhaustion never need to close explicitly.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..errors import ClosedResourceAccess
from .base import ByteSource

__all__ = ["BlobReader", "limit_reader", "release"]

logger = logging.getLogger(__name__)


class BlobReader:
    """
    Read-only view of the first ``limit`` bytes of an owned source.

    States: open -> released. Release happens once, either on end-of-data
    or on close(); every later close() is a no-op and every later read()
    raises ClosedResourceAccess.
    """

    def __init__(self, source: ByteSource, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self._source = source
        self._remaining = limit
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def remaining(self) -> int:
        return self._remaining

    def read(self, size: Optional[int] = -1) -> bytes:
        """
        Read up to size bytes, never past the limit.

        Args:
            size: Maximum bytes to return; None or negative reads everything
                up to the limit and releases the source

        Returns:
            Bytes read; b"" signals end-of-data and the source is released

        Raises:
            ClosedResourceAccess: If the source was already released
        """
        if self._closed:
            raise ClosedResourceAccess("read from released blob reader")

        if size is None or size < 0:
            return self._read_all()

        if size == 0 and self._remaining > 0:
            return b""

        chunk = self._source.read(min(size, self._remaining)) if self._remaining > 0 else b""
        if not chunk:
            self.close()
            return b""

        self._remaining -= len(chunk)
        return chunk

    def _read_all(self) -> bytes:
        parts = []
        while self._remaining > 0:
            chunk = self._source.read(self._remaining)
            if not chunk:
                break
            self._remaining -= len(chunk)
            parts.append(chunk)
        self.close()
        return b"".join(parts)

    def close(self) -> None:
        """Release the source. Safe to call any number of times."""
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Releasing blob source with {self._remaining} bytes unread")
        self._source.close()

    def __enter__(self) -> BlobReader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def limit_reader(source: ByteSource, n: int) -> BlobReader:
    """
    Wrap source so that at most n bytes are read from it.

    The returned reader takes ownership of source.
    """
    return BlobReader(source, n)


def release(reader: Optional[BlobReader]) -> None:
    """Close reader if there is one; closing nothing is a no-op."""
    if reader is None:
        return
    reader.close()
