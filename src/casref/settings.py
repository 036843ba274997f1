"""
Settings and configuration for casref.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables at construction time.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .ids import Digest, digest_for

__all__ = ["Settings", "create_settings_from_env"]


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for casref.

    Store Settings:
        store_root: Directory of the local object store
        hash_algorithm: hashlib algorithm used to compute IDs (32-byte output)

    Prefix Settings:
        min_prefix_length: Lower bound for prefix_length() results
    """
    store_root: Optional[str] = None
    hash_algorithm: str = "sha256"
    min_prefix_length: int = 8

    def __post_init__(self):
        """Validate settings on construction."""
        if self.store_root is not None and not self.store_root:
            raise ValueError("store_root must not be empty")

        if self.min_prefix_length < 1:
            raise ValueError(f"min_prefix_length must be positive, got {self.min_prefix_length}")

        # Fails for unknown algorithms and wrong digest sizes
        digest_for(self.hash_algorithm)

    @property
    def digest(self) -> Digest:
        return digest_for(self.hash_algorithm)


def create_settings_from_env(store_root: Optional[str] = None, *, require_store: bool = True) -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - CASREF_STORE (required unless store_root is given or require_store is False)
        - CASREF_HASH (default: sha256)
        - CASREF_MIN_PREFIX_LENGTH (default: 8)

    Args:
        store_root: Explicit store directory, overrides CASREF_STORE
        require_store: Fail when no store directory is configured; commands
            that never touch the store pass False

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid or required values missing

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    def get_int(key: str, default: int) -> int:
        value = os.getenv(key)
        if not value:
            return default
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"{key} must be an integer, got {value!r}") from e

    root = store_root or os.getenv("CASREF_STORE")
    if not root and require_store:
        raise ValueError("CASREF_STORE environment variable is required")

    return Settings(
        store_root=root or None,
        hash_algorithm=os.getenv("CASREF_HASH", "sha256"),
        min_prefix_length=get_int("CASREF_MIN_PREFIX_LENGTH", 8),
    )
