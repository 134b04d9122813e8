"""
Pytest configuration for kfconsole tests.

This module provides shared fixtures for all tests.
"""

from pathlib import Path

import pytest

from kfconsole.dispatcher import InputDispatcher
from kfconsole.shutdown import ShutdownCoordinator
from kfconsole.state import Session

from tests.fixtures import ScriptedInputSource, create_mock_engine, create_mock_store


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point config and records at a temp dir so tests never touch ~/.kfconsole."""
    from kfconsole import config

    base = tmp_path / "kfconsole-home"
    monkeypatch.setenv("KFCONSOLE_DIR", str(base))
    monkeypatch.setattr(config, "CONFIG_PATH", base / "config.yaml")
    return base


@pytest.fixture
def engine():
    return create_mock_engine()


@pytest.fixture
def store():
    return create_mock_store()


@pytest.fixture
def session():
    """Session with a 40-row terminal (visible_rows = 21)."""
    return Session(terminal_height=40)


@pytest.fixture
def dispatcher(engine, store, tmp_path):
    """InputDispatcher with mock collaborators and no queued input."""
    return InputDispatcher(
        ScriptedInputSource(),
        engine,
        store,
        shutdown=ShutdownCoordinator(engine),
        cwd=lambda: Path(tmp_path),
    )
