"""
Pytest configuration for CLI tests.
"""

import logging
from pathlib import Path
from typing import Generator
import pytest
from docver.config import get_settings
from docver.infrastructure.db.engine import dispose_engine


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch) -> Generator[str, None, None]:
    """Isolated working directory and database URL for one CLI test.

    Yields the database URL to pass with --database-url.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    get_settings.cache_clear()

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    yield f"sqlite:///{tmp_path / 'cli.db'}"

    dispose_engine()
    get_settings.cache_clear()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def test_env_file(tmp_path: Path) -> Path:
    """Create a test environment file."""
    env_file = tmp_path / ".env"
    env_file.write_text(
        "LOG_LEVEL=INFO\n"
        "DATABASE_URL=sqlite:///test.db\n"
        "PATH_REWRITE_MODE=reconstruct\n"
    )
    return env_file
