"""
Configuration management commands.
"""

import json
from pathlib import Path
from typing import Optional
import click
from dotenv import set_key, dotenv_values
from docver.config.validation import validate_config


@click.group()
def config() -> None:
    """Manage docver configuration."""
    pass


@config.command()
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.option("--env-file", default=".env", help="Path to .env file")
def set(key: Optional[str], value: Optional[str], env_file: str) -> None:
    """Set configuration value."""
    if not key or not value:
        click.echo("Usage: docver config set KEY VALUE")
        return

    validation = validate_config({key: value})[key]
    if not validation.is_valid:
        click.echo(f"❌ Invalid value for {key}: {validation.message}")
        return

    try:
        set_key(env_file, key, value)
        click.echo(f"✅ Successfully set {key}")
    except OSError as e:
        click.echo(f"❌ Error setting {key}: {str(e)}")


@config.command()
@click.argument("key", required=False)
@click.option("--env-file", default=".env", help="Path to .env file")
def get(key: Optional[str], env_file: str) -> None:
    """Get configuration value(s)."""
    if not Path(env_file).exists():
        click.echo("❌ Environment file not found")
        return

    config_values = dotenv_values(env_file)
    if not config_values:
        click.echo("No configuration values found")
        return

    if key:
        if key not in config_values:
            click.echo("Key not found")
            return
        click.echo(f"{key}={config_values[key]}")
    else:
        for k, v in config_values.items():
            click.echo(f"{k}={v}")


@config.command()
@click.option("--env-file", default=".env", help="Path to .env file")
def validate(env_file: str) -> None:
    """Validate every value of an environment file."""
    if not Path(env_file).exists():
        click.echo("❌ Environment file not found")
        return

    results = validate_config(dotenv_values(env_file))
    for key, result in results.items():
        mark = "✅" if result.is_valid else "❌"
        click.echo(f"{mark} {key}: {result.message}")

    if all(result.is_valid for result in results.values()):
        click.echo("Configuration is valid")


@config.command()
@click.option("--env-file", default=".env", help="Path to .env file")
@click.option("--output", default="config_backup.json", help="Output file path")
def backup(env_file: str, output: str) -> None:
    """Backup configuration to JSON file."""
    if not Path(env_file).exists():
        click.echo("❌ Environment file not found")
        return

    config_values = dotenv_values(env_file)
    if not config_values:
        click.echo("No configuration values to backup")
        return

    try:
        with open(output, "w") as f:
            json.dump(config_values, f, indent=2)
        click.echo(f"✅ Configuration backed up to {output}")
    except OSError as e:
        click.echo(f"❌ Error backing up configuration: {str(e)}")


@config.command()
@click.argument("backup_file")
@click.option("--env-file", default=".env", help="Path to .env file")
def restore(backup_file: str, env_file: str) -> None:
    """Restore configuration from JSON file."""
    try:
        with open(backup_file) as f:
            config_values = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        click.echo(f"❌ Error reading backup file: {str(e)}")
        return

    if not isinstance(config_values, dict) or not all(
        isinstance(key, str) and isinstance(value, str)
        for key, value in config_values.items()
    ):
        click.echo("❌ Backup file must contain a JSON object of string values")
        return

    validation_results = validate_config(config_values)
    has_errors = False
    for key, result in validation_results.items():
        if not result.is_valid:
            click.echo(f"❌ Invalid value for {key}: {result.message}")
            has_errors = True

    if has_errors:
        click.echo("❌ Restore aborted due to validation errors")
        return

    try:
        for key, value in config_values.items():
            set_key(env_file, key, value)
        click.echo("✅ Configuration restored successfully")
    except OSError as e:
        click.echo(f"❌ Error restoring configuration: {str(e)}")
