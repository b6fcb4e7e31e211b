"""Shared fixtures for the core tests."""
import pytest

from core.catalog import MissPolicy, build_registry
from core.lookup_store import LookupStore, default_store


@pytest.fixture
def store():
    return default_store()


@pytest.fixture
def small_store():
    return LookupStore.from_mappings(
        {"Тестовый Товар": 5, "пустой товар": 0},
        {"ООО Тест": 10.5},
    )


@pytest.fixture
def registry(store):
    return build_registry(store)


@pytest.fixture
def lenient_registry(store):
    return build_registry(store, MissPolicy.DEFAULT)
