"""
Tests for fake storage implementations.

These tests verify that fakes implement the protocols correctly, so other
tests can trust the counters they expose.
"""
from __future__ import annotations

import pytest

from casref.models import ObjectType
from casref.storage.base import ByteSource, Lister
from tests.storage.fakes.fake_lister import FakeLister
from tests.storage.fakes.fake_source import FakeSource


class TestFakeLister:
    """Test FakeLister behavior."""

    def test_lists_in_insertion_order(self):
        lister = FakeLister({ObjectType.DATA: ["b", "a"]})
        lister.add(ObjectType.DATA, "c")

        with lister.list(ObjectType.DATA) as names:
            assert list(names) == ["b", "a", "c"]

    def test_counts_cancellations(self):
        lister = FakeLister({ObjectType.DATA: ["a", "b"]})

        listing = lister.list(ObjectType.DATA)
        next(listing)
        listing.cancel()
        listing.cancel()

        assert lister.opened == 1
        assert lister.cancellations == 1
        assert lister.producer_closed == 1
        assert lister.yielded == 1

    def test_fail_after(self):
        lister = FakeLister({ObjectType.DATA: ["a", "b"]}, fail_after=1)

        with pytest.raises(OSError):
            with lister.list(ObjectType.DATA) as names:
                list(names)
        assert lister.cancellations == 1

    def test_subclasses_protocol(self):
        assert isinstance(FakeLister(), Lister)


class TestFakeSource:
    """Test FakeSource behavior."""

    def test_counts_closes(self):
        source = FakeSource(b"abc")
        source.close()
        source.close()
        assert source.close_count == 2

    def test_max_chunk(self):
        source = FakeSource(b"abcdef", max_chunk=2)
        assert source.read(5) == b"ab"
        assert source.read() == b"cd"

    def test_implements_protocol(self):
        assert isinstance(FakeSource(b""), ByteSource)
