"""
Tests for settings module.

Tests settings validation and environment variable loading.
"""
from __future__ import annotations

import hashlib

import pytest

from casref.settings import Settings, create_settings_from_env


class TestSettings:
    """Test Settings dataclass validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.store_root is None
        assert settings.hash_algorithm == "sha256"
        assert settings.min_prefix_length == 8

    def test_digest_follows_algorithm(self):
        settings = Settings(hash_algorithm="sha3_256")
        assert settings.digest(b"abc") == hashlib.sha3_256(b"abc").digest()

    def test_empty_store_root_raises(self):
        with pytest.raises(ValueError, match="store_root must not be empty"):
            Settings(store_root="")

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_min_prefix_length_raises(self, value):
        with pytest.raises(ValueError, match="min_prefix_length must be positive"):
            Settings(min_prefix_length=value)

    def test_wrong_digest_size_raises(self):
        with pytest.raises(ValueError, match="produces 20 bytes"):
            Settings(hash_algorithm="sha1")

    def test_unknown_algorithm_raises(self):
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            Settings(hash_algorithm="md17")

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.min_prefix_length = 4  # type: ignore[misc]


class TestSettingsFromEnv:
    """Test environment loading."""

    def test_requires_store(self):
        with pytest.raises(ValueError, match="CASREF_STORE environment variable is required"):
            create_settings_from_env()

    def test_loads_all_values(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CASREF_STORE", str(tmp_path))
        monkeypatch.setenv("CASREF_HASH", "sha3_256")
        monkeypatch.setenv("CASREF_MIN_PREFIX_LENGTH", "12")

        settings = create_settings_from_env()

        assert settings.store_root == str(tmp_path)
        assert settings.hash_algorithm == "sha3_256"
        assert settings.min_prefix_length == 12

    def test_store_optional_when_not_required(self, monkeypatch):
        monkeypatch.setenv("CASREF_HASH", "sha3_256")

        settings = create_settings_from_env(require_store=False)

        assert settings.store_root is None
        assert settings.hash_algorithm == "sha3_256"

    def test_explicit_store_overrides_env(self, monkeypatch):
        monkeypatch.setenv("CASREF_STORE", "/from/env")

        settings = create_settings_from_env("/explicit")
        assert settings.store_root == "/explicit"

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("CASREF_STORE", "/store")
        monkeypatch.setenv("CASREF_MIN_PREFIX_LENGTH", "eight")

        with pytest.raises(ValueError, match="CASREF_MIN_PREFIX_LENGTH must be an integer"):
            create_settings_from_env()

    def test_fresh_instance_every_call(self, monkeypatch):
        monkeypatch.setenv("CASREF_STORE", "/store")
        first = create_settings_from_env()
        monkeypatch.setenv("CASREF_MIN_PREFIX_LENGTH", "10")
        second = create_settings_from_env()

        assert first.min_prefix_length == 8
        assert second.min_prefix_length == 10
