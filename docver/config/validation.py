"""
Configuration validation module.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict


@dataclass
class ValidationResult:
    """Result of a configuration validation."""

    is_valid: bool
    message: str


def validate_database_url(url: str) -> ValidationResult:
    """Validate database URL format."""
    valid_schemes = ["sqlite", "postgresql", "mysql"]
    if "://" not in url:
        return ValidationResult(False, "Invalid database URL format")

    # Driver suffixes such as postgresql+psycopg2 are allowed
    scheme = url.split("://")[0].split("+")[0]
    if scheme not in valid_schemes:
        return ValidationResult(
            False,
            f"Invalid database scheme. Must be one of: {', '.join(valid_schemes)}",
        )
    return ValidationResult(True, "Valid database URL")


def validate_log_level(level: str) -> ValidationResult:
    """Validate log level."""
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if level.upper() in valid_levels:
        return ValidationResult(True, "Valid log level")
    return ValidationResult(
        False, f"Invalid log level. Must be one of: {', '.join(valid_levels)}"
    )


def validate_log_file(path: str) -> ValidationResult:
    """Validate log file path."""
    log_dir = Path(path).parent
    if not log_dir.exists():
        return ValidationResult(False, f"Log directory does not exist: {log_dir}")
    return ValidationResult(True, "Valid log file path")


def validate_pool_size(value: str) -> ValidationResult:
    """Validate connection pool size."""
    try:
        size = int(value)
    except (TypeError, ValueError):
        return ValidationResult(False, "Pool size must be an integer")
    if size < 1:
        return ValidationResult(False, "Pool size must be at least 1")
    return ValidationResult(True, "Valid pool size")


def validate_echo_sql(value: str) -> ValidationResult:
    """Validate SQL echo flag."""
    if str(value).lower() in ("1", "0", "true", "false", "yes", "no", "on", "off"):
        return ValidationResult(True, "Valid SQL echo flag")
    return ValidationResult(False, "SQL echo flag must be a boolean")


def validate_path_rewrite_mode(mode: str) -> ValidationResult:
    """Validate the rename cascade filename mode."""
    valid_modes = ["reconstruct", "substitute"]
    if mode in valid_modes:
        return ValidationResult(True, "Valid path rewrite mode")
    return ValidationResult(
        False, f"Invalid path rewrite mode. Must be one of: {', '.join(valid_modes)}"
    )


VALIDATORS: Dict[str, Callable[[str], ValidationResult]] = {
    "DATABASE_URL": validate_database_url,
    "LOG_LEVEL": validate_log_level,
    "LOG_FILE": validate_log_file,
    "POOL_SIZE": validate_pool_size,
    "ECHO_SQL": validate_echo_sql,
    "PATH_REWRITE_MODE": validate_path_rewrite_mode,
}


def validate_config(config: Dict[str, str]) -> Dict[str, ValidationResult]:
    """Validate all configuration settings.

    Keys that docver does not know about are reported as invalid.
    """
    results = {}

    for key, value in config.items():
        validator = VALIDATORS.get(key)
        if validator is None:
            results[key] = ValidationResult(False, f"Invalid configuration key: {key}")
            continue
        results[key] = validator(value)

    return results
