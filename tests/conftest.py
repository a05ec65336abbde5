"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fakes.fake_presenter import FakeTrayPresenter
from tests.fakes.fake_spawner import FakeProcessSpawner


@pytest.fixture
def presenter() -> FakeTrayPresenter:
    return FakeTrayPresenter()


@pytest.fixture
def spawner() -> FakeProcessSpawner:
    return FakeProcessSpawner()


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"
