"""Logging setup for docver processes."""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Route docver's log records to the console and optionally to a file.

    Console records go to stderr by default, so that command output written
    to stdout (for example ``--json``) can be piped and parsed.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL, in any case
        log_file: Optional file path that also receives every record
        stream: Console stream, stderr when not given
    """
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())
    root_logger.handlers = []

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # ECHO_SQL turns statement logging on at the engine level instead
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    root_logger.debug(f"Logging configured with level={log_level}, file={log_file}")
