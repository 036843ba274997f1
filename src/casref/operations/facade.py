"""
Operations Facade - Application service layer.

Provides a clean interface between the CLI and the resolver/store APIs,
centralizing command orchestration and configuration while keeping CLI
commands thin and testable.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from ..ids import hash_data
from ..models import HashResult, ObjectType, PrefixReport, Resolution
from ..resolve import find as _find, prefix_length as _prefix_length
from ..settings import Settings
from ..storage.base import ObjectStore

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1 MiB


@dataclass(frozen=True)
class OpsConfig:
    """
    Configuration for Operations facade.

    Centralizes output policy so it is not scattered across commands.
    """
    json: bool = False            # Machine-readable output
    verbose: bool = False         # Show detailed output


class Operations:
    """
    Application service facade for CLI operations.

    One method per CLI verb. Exceptions bubble up unchanged for central
    mapping to exit codes.
    """

    def __init__(self, config: OpsConfig, store: Optional[ObjectStore] = None,
                 settings: Optional[Settings] = None):
        """
        Initialize Operations facade.

        Args:
            config: Configuration settings
            store: Object store (if None, a local store is built from settings
                on first use, so verbs that never touch the store work without one)
            settings: Optional settings (if None, loaded from environment)
        """
        self.cfg = config

        if settings is None:
            from ..settings import create_settings_from_env
            settings = create_settings_from_env(require_store=store is None)
        self.settings = settings
        self._store = store

    @property
    def store(self) -> ObjectStore:
        """
        Get or create the object store (lazy initialization).

        Raises:
            ValueError: If no store was injected and settings name none
        """
        if self._store is None:
            from ..storage.local import LocalObjectStore
            if not self.settings.store_root:
                raise ValueError("No object store configured")
            self._store = LocalObjectStore(self.settings.store_root, digest=self.settings.digest)
        return self._store

    def find(self, object_type: ObjectType, prefix: str) -> Resolution:
        name = _find(self.store, object_type, prefix)
        return Resolution(type=object_type, prefix=prefix, id=name)

    def find_snapshot(self, prefix: str) -> Resolution:
        return self.find(ObjectType.SNAPSHOT, prefix)

    def prefix_length(self, object_type: ObjectType) -> PrefixReport:
        min_length = self.settings.min_prefix_length
        length = _prefix_length(self.store, object_type, min_length)
        return PrefixReport(type=object_type, prefix_length=length, min_length=min_length)

    def hash_file(self, path: Path) -> HashResult:
        """Compute the ID a file would be stored under, without storing it."""
        data = Path(path).read_bytes()
        oid = hash_data(data, self.settings.digest)
        return HashResult(path=str(path), size=len(data), id=str(oid),
                          algorithm=self.settings.hash_algorithm)

    def add(self, object_type: ObjectType, path: Path) -> HashResult:
        object_type = ObjectType(object_type)
        data = Path(path).read_bytes()
        oid = self.store.save(object_type, data)
        logger.info(f"Added {path} as {object_type.value}/{oid.short()}")
        return HashResult(path=str(path), size=len(data), id=str(oid),
                          algorithm=self.settings.hash_algorithm)

    def cat(
        self,
        object_type: ObjectType,
        prefix: str,
        out: BinaryIO,
        *,
        offset: int = 0,
        length: Optional[int] = None,
    ) -> int:
        """
        Resolve prefix and copy the object (or a slice of it) to out.

        Returns:
            Number of bytes written
        """
        name = _find(self.store, object_type, prefix)
        written = 0
        with self.store.open(object_type, name, offset=offset, length=length) as reader:
            while True:
                chunk = reader.read(CHUNK_SIZE)
                if not chunk:
                    break
                out.write(chunk)
                written += len(chunk)
        return written
