"""ID helpers for tests."""
from __future__ import annotations

from casref.ids import hash_data


def make_id(seed: str) -> str:
    """Full ID string derived from arbitrary seed text."""
    return str(hash_data(seed.encode()))


def id_with_prefix(prefix: str, fill: str = "0") -> str:
    """Full-width ID string starting with prefix, padded with fill."""
    return prefix + fill * (64 - len(prefix))
