"""Shared fixtures: a file-backed SQLite store per test."""

import pytest

from studio.core.config import Settings
from studio.db.session import make_engine
from studio.db.store import StoreAdapter
from studio.state import StudioState


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'studio.db'}", echo=False)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return StoreAdapter(engine)


@pytest.fixture
def test_settings():
    return Settings(_env_file=None)


@pytest.fixture
def state(store, test_settings):
    return StudioState.load(store, test_settings)
