import io
import logging
import sys
from pathlib import Path
import pytest
from docver.infrastructure.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)


def test_configure_logging_console_only(restore_root_logger):
    configure_logging("debug")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert logging.getLogger("sqlalchemy").level == logging.WARNING


def test_configure_logging_with_file(restore_root_logger, tmp_path: Path):
    log_file = tmp_path / "docver.log"
    configure_logging("INFO", str(log_file))

    logging.getLogger("docver.test").info("written to file")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert len(restore_root_logger.handlers) == 2
    assert "written to file" in log_file.read_text()


def test_console_records_go_to_stderr(restore_root_logger):
    configure_logging("INFO")

    (handler,) = restore_root_logger.handlers
    assert handler.stream is sys.stderr


def test_console_stream_override(restore_root_logger):
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)

    logging.getLogger("docver.test").info("to the given stream")
    assert "to the given stream" in stream.getvalue()
