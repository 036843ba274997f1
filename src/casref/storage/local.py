"""
Local filesystem object store.

Layout under the store root:

    data/<first two hex chars>/<id>
    keys/<id>
    locks/<id>
    snapshots/<id>
    index/<id>

Objects are written once under the ID of their content and never modified.
"""
from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Iterator, Optional, Union

from ..ids import Digest, ObjectID, hash_data, sha256_digest
from ..models import ObjectType
from .base import Listing, ObjectStore
from .blob_reader import BlobReader, limit_reader

__all__ = ["LocalObjectStore", "TYPE_DIRS"]

logger = logging.getLogger(__name__)

TYPE_DIRS = {
    ObjectType.DATA: "data",
    ObjectType.KEY: "keys",
    ObjectType.LOCK: "locks",
    ObjectType.SNAPSHOT: "snapshots",
    ObjectType.INDEX: "index",
}

_NAME_RE = re.compile(r"[0-9a-f]{64}")


class LocalObjectStore(ObjectStore):
    """
    ObjectStore backed by a directory tree.

    The digest used by save() is injected so stores can be created for
    alternate hash algorithms.
    """

    def __init__(self, root: Union[str, Path], *, digest: Digest = sha256_digest) -> None:
        self._root = Path(root)
        self._digest = digest
        logger.debug(f"Local object store at {self._root}")

    @property
    def root(self) -> Path:
        return self._root

    def _dirname(self, object_type: ObjectType) -> Path:
        return self._root / TYPE_DIRS[ObjectType(object_type)]

    def _path(self, object_type: ObjectType, name: str) -> Path:
        if not _NAME_RE.fullmatch(name):
            raise ValueError(f"invalid object name: {name!r}")
        base = self._dirname(object_type)
        if ObjectType(object_type) is ObjectType.DATA:
            return base / name[:2] / name
        return base / name

    def save(self, object_type: ObjectType, data: bytes) -> ObjectID:
        """Store data atomically under its content ID."""
        object_type = ObjectType(object_type)
        oid = hash_data(data, self._digest)
        target = self._path(object_type, str(oid))
        if target.exists():
            logger.debug(f"{object_type.value}/{oid.short()} already stored")
            return oid

        target.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(prefix=".casref.tmp.", dir=target.parent)
        temp_path = Path(temp_path)

        try:
            with os.fdopen(fd, "wb") as out:
                out.write(data)
                out.flush()
                os.fsync(out.fileno())
            os.replace(temp_path, target)
        except Exception:
            try:
                temp_path.unlink()
            except FileNotFoundError:
                pass
            raise

        logger.debug(f"Saved {object_type.value}/{oid.short()} ({len(data)} bytes)")
        return oid

    def exists(self, object_type: ObjectType, name: str) -> bool:
        return self._path(object_type, name).is_file()

    def stat(self, object_type: ObjectType, name: str) -> int:
        return self._path(object_type, name).stat().st_size

    def list(self, object_type: ObjectType) -> Listing:
        object_type = ObjectType(object_type)
        base = self._dirname(object_type)
        logger.debug(f"Listing {object_type.value} objects in {base}")

        def _cancelled() -> None:
            logger.debug(f"Listing of {object_type.value} objects cancelled")

        if object_type is ObjectType.DATA:
            names = self._walk_nested(base)
        else:
            names = self._walk_flat(base)
        return Listing(names, on_cancel=_cancelled)

    @staticmethod
    def _walk_flat(base: Path) -> Iterator[str]:
        if not base.is_dir():
            return
        with os.scandir(base) as entries:
            for entry in entries:
                if entry.is_file() and _NAME_RE.fullmatch(entry.name):
                    yield entry.name

    @classmethod
    def _walk_nested(cls, base: Path) -> Iterator[str]:
        if not base.is_dir():
            return
        with os.scandir(base) as subdirs:
            for sub in subdirs:
                if sub.is_dir():
                    yield from cls._walk_flat(Path(sub.path))

    def open(
        self,
        object_type: ObjectType,
        name: str,
        *,
        offset: int = 0,
        length: Optional[int] = None,
    ) -> BlobReader:
        path = self._path(object_type, name)
        f = open(path, "rb")
        try:
            size = os.fstat(f.fileno()).st_size
            if offset < 0 or offset > size:
                raise ValueError(f"offset {offset} outside object of {size} bytes")
            if length is None:
                length = size - offset
            if length < 0 or offset + length > size:
                raise ValueError(f"slice [{offset}, {offset + length}) outside object of {size} bytes")
            f.seek(offset)
            return limit_reader(f, length)
        except Exception:
            f.close()
            raise
