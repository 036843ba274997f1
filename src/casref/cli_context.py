"""
CLI Context for managing application dependencies.

Provides a clean way to manage CLI-level dependencies like settings and the
object store, avoiding global state and enabling proper dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .settings import Settings, create_settings_from_env
from .storage.local import LocalObjectStore


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Manages application-level dependencies (settings, store) that are
    initialized once and shared across a CLI command execution.
    """
    settings: Settings
    _store: Optional[LocalObjectStore] = None

    @classmethod
    def from_env(cls, store_root: Optional[str] = None, *, require_store: bool = True) -> CLIContext:
        """
        Create CLI context from environment variables.

        Args:
            store_root: Store directory overriding CASREF_STORE
            require_store: Fail early when no store directory is configured
        """
        settings = create_settings_from_env(store_root, require_store=require_store)
        return cls(settings=settings)

    @property
    def store(self) -> LocalObjectStore:
        """Get or create the store instance (lazy initialization)."""
        if self._store is None:
            if not self.settings.store_root:
                raise ValueError("No object store configured")
            self._store = LocalObjectStore(self.settings.store_root, digest=self.settings.digest)
        return self._store
