"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file at a temporary directory and drop any cached config."""
    from padthai import config

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    config.set_config(None)
    yield
    config.set_config(None)


@pytest.fixture
def initial_board():
    """Create an initial board."""
    from padthai.board import Board
    return Board.initial()


@pytest.fixture
def empty_board():
    """Create an empty board."""
    from padthai.board import Board
    return Board.empty()
