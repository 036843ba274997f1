"""Root pytest configuration for casref tests."""
import pytest

from casref.settings import Settings
from casref.storage.local import LocalObjectStore
from .storage.fakes.fake_lister import FakeLister


# Configure pytest markers
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (may take significant time)"
    )


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Clear casref environment variables so tests never see the host config."""
    for key in ("CASREF_STORE", "CASREF_HASH", "CASREF_MIN_PREFIX_LENGTH"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings(tmp_path):
    """Standard test settings pointing at a temporary store."""
    return Settings(store_root=str(tmp_path / "store"))


@pytest.fixture
def store(settings):
    """Empty local object store."""
    return LocalObjectStore(settings.store_root)


@pytest.fixture
def lister():
    """Empty fake lister."""
    return FakeLister()

