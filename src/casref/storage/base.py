"""
Storage interfaces for casref.

These protocols define the boundary between prefix resolution and storage
backends, enabling dependency injection and testing with fakes.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, Protocol, runtime_checkable

from ..ids import ObjectID
from ..models import ObjectType

__all__ = ["Listing", "Lister", "ByteSource", "ObjectStore"]

logger = logging.getLogger(__name__)


class Listing(Iterator[str]):
    """
    Cancelable, single-use sequence of ID strings for one object type.

    The producer is usually a generator. cancel() closes it, which runs the
    producer's finally/with blocks so handles tied to the enumeration are
    released, then notifies on_cancel. cancel() is one-shot: later calls
    are no-ops. Leaving a ``with`` block cancels the listing.
    """

    def __init__(
        self,
        names: Iterable[str],
        *,
        on_cancel: Optional[Callable[[], None]] = None,
    ) -> None:
        self._it = iter(names)
        self._on_cancel = on_cancel
        self._cancelled = False

    def __iter__(self) -> Listing:
        return self

    def __next__(self) -> str:
        if self._cancelled:
            raise StopIteration
        return next(self._it)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Signal that no more names are needed."""
        if self._cancelled:
            return
        self._cancelled = True

        close = getattr(self._it, "close", None)
        try:
            if close is not None:
                close()
        finally:
            if self._on_cancel is not None:
                self._on_cancel()

    def __enter__(self) -> Listing:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


@runtime_checkable
class Lister(Protocol):
    """Protocol for enumerating the IDs of one object type."""

    def list(self, object_type: ObjectType) -> Listing:
        """
        Start listing all IDs of object_type.

        No ordering and no duplicate elimination is promised. Callers must
        cancel the returned Listing when done with it, on every exit path.

        Args:
            object_type: Category to enumerate

        Returns:
            Listing of 64-char hex ID strings

        Raises:
            OSError: For I/O errors while enumerating
        """
        ...


@runtime_checkable
class ByteSource(Protocol):
    """A closable byte source, e.g. an open binary file."""

    def read(self, size: int = -1) -> bytes:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class ObjectStore(Lister, Protocol):
    """Protocol for a content-addressed object store."""

    def save(self, object_type: ObjectType, data: bytes) -> ObjectID:
        """
        Store data under the ID of its content.

        Saving content that already exists is a no-op.

        Returns:
            ObjectID of data
        """
        ...

    def exists(self, object_type: ObjectType, name: str) -> bool:
        ...

    def stat(self, object_type: ObjectType, name: str) -> int:
        """
        Size in bytes of a stored object.

        Raises:
            FileNotFoundError: If the object does not exist
        """
        ...

    def open(
        self,
        object_type: ObjectType,
        name: str,
        *,
        offset: int = 0,
        length: Optional[int] = None,
    ):
        """
        Open a bounded reader over a slice of a stored object.

        Args:
            object_type: Category of the object
            name: Full ID string
            offset: First byte of the slice
            length: Slice length; None reads to the end of the object

        Returns:
            BlobReader that releases the object when the slice is exhausted

        Raises:
            FileNotFoundError: If the object does not exist
            ValueError: If the slice lies outside the object
        """
        ...
