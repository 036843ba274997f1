"""
Tests for object identifiers and hashing.
"""
from __future__ import annotations

import hashlib

import pytest

from casref.ids import (
    HEX_ID_LEN,
    ID_SIZE,
    ObjectID,
    digest_for,
    hash_data,
    sha256_digest,
)


class TestHashData:
    """Test hash_data determinism and digest injection."""

    def test_matches_sha256(self):
        data = b"hello world"
        assert hash_data(data).raw == hashlib.sha256(data).digest()

    def test_empty_input(self):
        oid = hash_data(b"")
        assert str(oid) == hashlib.sha256(b"").hexdigest()

    def test_deterministic(self):
        assert hash_data(b"same bytes") == hash_data(b"same bytes")

    def test_different_data_different_ids(self):
        ids = {hash_data(f"object-{i}".encode()) for i in range(100)}
        assert len(ids) == 100

    def test_injected_digest(self):
        oid = hash_data(b"data", digest=lambda data: b"\x01" * ID_SIZE)
        assert oid.raw == b"\x01" * ID_SIZE

    def test_short_digest_is_zero_padded(self):
        oid = hash_data(b"data", digest=lambda data: b"\xff\xff")
        assert oid.raw == b"\xff\xff" + bytes(ID_SIZE - 2)

    def test_long_digest_is_truncated(self):
        oid = hash_data(b"data", digest=lambda data: hashlib.sha512(data).digest())
        assert oid.raw == hashlib.sha512(b"data").digest()[:ID_SIZE]


class TestDigestFor:
    """Test digest strategies built from algorithm names."""

    def test_sha256(self):
        assert digest_for("sha256") is sha256_digest

    def test_sha3_256(self):
        digest = digest_for("sha3_256")
        assert digest(b"abc") == hashlib.sha3_256(b"abc").digest()

    def test_wrong_size_rejected(self):
        with pytest.raises(ValueError, match="produces 64 bytes"):
            digest_for("sha512")

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            digest_for("not-a-hash")


class TestObjectID:
    """Test ObjectID encoding and comparison."""

    def test_roundtrip(self):
        for i in range(20):
            oid = hash_data(bytes([i]) * i)
            assert ObjectID.from_hex(str(oid)) == oid

    def test_leading_zero_bytes_keep_width(self):
        oid = ObjectID(bytes(ID_SIZE - 1) + b"\x01")
        text = str(oid)
        assert len(text) == HEX_ID_LEN
        assert text == "0" * 62 + "01"
        assert ObjectID.from_hex(text) == oid

    def test_uppercase_hex_accepted(self):
        oid = hash_data(b"x")
        assert ObjectID.from_hex(str(oid).upper()) == oid

    @pytest.mark.parametrize("text", ["", "abc", "a" * 63, "a" * 65])
    def test_wrong_length_rejected(self, text):
        with pytest.raises(ValueError, match="invalid length"):
            ObjectID.from_hex(text)

    def test_non_hex_rejected(self):
        with pytest.raises(ValueError, match="not hex"):
            ObjectID.from_hex("g" * HEX_ID_LEN)

    def test_wrong_raw_size_rejected(self):
        with pytest.raises(ValueError, match="must be 32 bytes"):
            ObjectID(b"short")

    def test_immutable(self):
        oid = hash_data(b"x")
        with pytest.raises(AttributeError):
            oid.raw = bytes(ID_SIZE)  # type: ignore[misc]

    def test_hashable(self):
        a, b = hash_data(b"a"), hash_data(b"a")
        assert {a: 1}[b] == 1

    def test_short_and_prefix(self):
        oid = hash_data(b"x")
        assert oid.short() == str(oid)[:8]
        assert oid.has_prefix(str(oid)[:5])
        assert oid.has_prefix(str(oid)[:5].upper())
        assert not oid.has_prefix("z")

    def test_null(self):
        assert ObjectID.null().is_null()
        assert not hash_data(b"x").is_null()
