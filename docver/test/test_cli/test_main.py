"""
Tests for the document commands of the CLI.
"""

import json
from click.testing import CliRunner
from docver.cli.main import cli
from docver.config import get_settings


def invoke(db_url: str, *args: str):
    return CliRunner().invoke(cli, ["--database-url", db_url, *args])


def test_version_command(cli_env: str) -> None:
    result = invoke(cli_env, "version")
    assert result.exit_code == 0
    assert "docver version" in result.output


def test_document_workflow(cli_env: str) -> None:
    """Create, rename, add a version and archive through the CLI."""
    result = invoke(cli_env, "init-db")
    assert result.exit_code == 0
    assert "Database schema is ready" in result.output

    result = invoke(cli_env, "create", "Report", "2024-01-01", "docs/Report/Report.docx")
    assert result.exit_code == 0
    assert "Created document 1" in result.output

    result = invoke(cli_env, "rename", "1", "Report2")
    assert result.exit_code == 0
    assert "docs/Report/Report.docx -> docs/Report2/Report2.docx" in result.output

    result = invoke(
        cli_env, "add-version", "1", "2024-02-01", "docs/Report2/Report2_v2.docx"
    )
    assert result.exit_code == 0

    result = invoke(cli_env, "archive", "1")
    assert result.exit_code == 0
    assert "Archived document 1" in result.output

    result = invoke(cli_env, "show", "1", "--json")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["name"] == "Report2"
    assert payload["archived_date"] is not None
    assert [v["file_path"] for v in payload["versions"]] == [
        "docs/Report2/Report2.docx",
        "docs/Report2/Report2_v2.docx",
    ]

    result = invoke(cli_env, "list", "--active")
    assert result.exit_code == 0
    assert "No documents found" in result.output

    result = invoke(cli_env, "list")
    assert result.exit_code == 0
    assert "[1] Report2 (archived" in result.output


def test_list_json(cli_env: str) -> None:
    invoke(cli_env, "init-db")
    invoke(cli_env, "create", "A", "2024-01-01", "docs/A/A.pdf")

    result = invoke(cli_env, "list", "--json")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert len(payload) == 1
    assert payload[0]["versions"][0]["file_path"] == "docs/A/A.pdf"


def test_rename_json_report(cli_env: str) -> None:
    invoke(cli_env, "init-db")
    invoke(cli_env, "create", "A", "2024-01-01", "docs/A/A.pdf")

    result = invoke(cli_env, "rename", "1", "B", "--json")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["changes"] == [
        {"version_id": 1, "old_path": "docs/A/A.pdf", "new_path": "docs/B/B.pdf"}
    ]
    assert payload["anomalies"] == []


def test_show_missing_document(cli_env: str) -> None:
    invoke(cli_env, "init-db")
    result = invoke(cli_env, "show", "99")
    assert result.exit_code == 1
    assert "Document 99 not found" in result.output


def test_create_validation_error(cli_env: str) -> None:
    invoke(cli_env, "init-db")
    result = invoke(cli_env, "create", "", "2024-01-01", "docs/A/A.pdf")
    assert result.exit_code == 1
    assert "The file name is required" in result.output


def test_archive_missing_document(cli_env: str) -> None:
    invoke(cli_env, "init-db")
    result = invoke(cli_env, "archive", "5")
    assert result.exit_code == 1
    assert "Document 5 does not exist" in result.output


def test_store_error_without_schema(cli_env: str) -> None:
    result = invoke(cli_env, "list")
    assert result.exit_code == 1
    assert "An error occurred while getting the documents" in result.output


def test_rename_json_at_default_log_level(cli_env: str, monkeypatch) -> None:
    """INFO log records must not end up in the JSON written to stdout."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    invoke(cli_env, "init-db")
    invoke(cli_env, "create", "A", "2024-01-01", "docs/A/A.pdf")

    result = invoke(cli_env, "rename", "1", "B", "--json")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["new_name"] == "B"
    assert payload["changes"][0]["new_path"] == "docs/B/B.pdf"


def test_invalid_database_url(cli_env: str) -> None:
    result = invoke("bogus", "list")
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot open the store" in result.output


def test_init_db_invalid_database_url(cli_env: str) -> None:
    result = invoke("bogus", "init-db")
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_invalid_settings_are_reported(cli_env: str, monkeypatch) -> None:
    monkeypatch.setenv("PATH_REWRITE_MODE", "sideways")
    get_settings.cache_clear()

    result = invoke(cli_env, "list")
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
