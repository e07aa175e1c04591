"""Shared fixtures for pattern catalog tests."""

import io

import pytest
from rich.console import Console

from pattern_catalog.creational.singleton import Singleton
from pattern_catalog.narrator import Narrator
from pattern_catalog.settings import get_settings


@pytest.fixture
def narrator() -> Narrator:
    """Narrator printing to an in-memory console."""
    console = Console(file=io.StringIO(), width=120, color_system=None)
    return Narrator(console=console)


@pytest.fixture
def fresh_singleton(monkeypatch):
    """Start a test with no Singleton instance and a zeroed counter."""
    monkeypatch.setattr(Singleton, "_instance", None)
    monkeypatch.setattr(Singleton, "instances_created", 0)
    yield
    # monkeypatch restores the previous instance afterwards


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; drop the cache around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
