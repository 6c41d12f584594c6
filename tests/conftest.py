"""Shared pytest fixtures for tests."""

import sys
from unittest.mock import Mock

import pytest

from lazy_cwl.core.config import Settings
from lazy_cwl.core.context import AppContext
from lazy_cwl.core.store import ConfigStore


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "lazy-cwl" / "config.json"


@pytest.fixture
def store(config_path):
    return ConfigStore(config_path)


@pytest.fixture
def settings(config_path):
    return Settings(config_path=config_path)


@pytest.fixture
def mock_logs_client():
    return Mock()


@pytest.fixture
def app_context(settings, store, mock_logs_client):
    return AppContext(settings=settings, store=store, logs_client_factory=lambda: mock_logs_client)


@pytest.fixture
def python_child():
    """Build an argv that runs a short Python script as the child process."""

    def _argv(script: str) -> list[str]:
        return [sys.executable, "-c", script]

    return _argv
