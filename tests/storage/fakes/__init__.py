# Fake implementations for testing

from .fake_lister import FakeLister
from .fake_source import FakeSource

__all__ = ["FakeLister", "FakeSource"]
