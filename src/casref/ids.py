"""
Object identifiers for casref.

An ObjectID is the fixed-size digest of an object's content. Its canonical
text form is lowercase hex, always exactly HEX_ID_LEN characters wide.
The digest function is injected by callers rather than held as module
state, so alternate digests can be used for testing or migration.
"""
from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Callable

__all__ = [
    "ID_SIZE",
    "HEX_ID_LEN",
    "Digest",
    "ObjectID",
    "sha256_digest",
    "digest_for",
    "hash_data",
]

ID_SIZE = 32
HEX_ID_LEN = ID_SIZE * 2

# A digest strategy maps content bytes to raw digest bytes
Digest = Callable[[bytes], bytes]

_HEX_RE = re.compile(r"[0-9a-f]+")


@dataclass(frozen=True, slots=True)
class ObjectID:
    """
    Content-derived identifier of a stored object.

    Invariants:
    - raw: exactly ID_SIZE bytes
    - two ids are equal iff their bytes are equal
    """
    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes):
            raise TypeError(f"ObjectID requires bytes, got {type(self.raw).__name__}")
        if len(self.raw) != ID_SIZE:
            raise ValueError(f"ObjectID must be {ID_SIZE} bytes, got {len(self.raw)}")

    @classmethod
    def from_hex(cls, text: str) -> ObjectID:
        """
        Parse the canonical hex form.

        Args:
            text: HEX_ID_LEN hex characters (upper case is accepted)

        Returns:
            The parsed ObjectID

        Raises:
            ValueError: If text has the wrong length or is not hex
        """
        if len(text) != HEX_ID_LEN:
            raise ValueError(f"invalid length for ID: {text!r} has {len(text)} chars, want {HEX_ID_LEN}")
        text = text.lower()
        if not _HEX_RE.fullmatch(text):
            raise ValueError(f"invalid ID, not hex: {text!r}")
        return cls(bytes.fromhex(text))

    @classmethod
    def null(cls) -> ObjectID:
        return cls(bytes(ID_SIZE))

    def is_null(self) -> bool:
        return self.raw == bytes(ID_SIZE)

    def short(self) -> str:
        """Return the 8-character display form."""
        return str(self)[:8]

    def has_prefix(self, prefix: str) -> bool:
        return str(self).startswith(prefix.lower())

    def __str__(self) -> str:
        return self.raw.hex()

    def __repr__(self) -> str:
        return f"ObjectID({self.short()})"


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def digest_for(algorithm: str) -> Digest:
    """
    Build a digest strategy from a hashlib algorithm name.

    Args:
        algorithm: Name accepted by hashlib.new, e.g. "sha256" or "sha3_256"

    Returns:
        Digest callable producing ID_SIZE bytes

    Raises:
        ValueError: If the algorithm is unknown or its output is not ID_SIZE bytes
    """
    try:
        probe = hashlib.new(algorithm)
    except ValueError as e:
        raise ValueError(f"Unknown hash algorithm: {algorithm}") from e

    if probe.digest_size != ID_SIZE:
        raise ValueError(
            f"Hash algorithm {algorithm} produces {probe.digest_size} bytes, need {ID_SIZE}"
        )

    if algorithm == "sha256":
        return sha256_digest

    def _digest(data: bytes) -> bytes:
        return hashlib.new(algorithm, data).digest()

    return _digest


def hash_data(data: bytes, digest: Digest = sha256_digest) -> ObjectID:
    """
    Compute the ObjectID for data.

    The digest output is copied into an ID_SIZE buffer: a shorter digest is
    zero padded and a longer one is truncated.
    """
    h = digest(data)
    return ObjectID(h[:ID_SIZE].ljust(ID_SIZE, b"\x00"))
