"""
Main CLI module for docver.
"""

import json
import sys
from importlib.metadata import PackageNotFoundError, version as package_version
from typing import Optional

import click
from pydantic import ValidationError as SettingsError
from sqlalchemy.exc import SQLAlchemyError

from docver.application.dto.document import DocumentResponse, RenameResponse
from docver.application.services.exceptions import DocumentStoreError, StoreError
from docver.application.services.path_rewriter import PathRewriter
from docver.cli.config_cmd import config
from docver.config import get_settings
from docver.domain.models import DomainDocument
from docver.infrastructure.db.engine import create_schema, dispose_engine, init_engine
from docver.infrastructure.db.gateway import StoreGateway
from docver.infrastructure.logging_config import configure_logging
from docver.infrastructure.repositories.document_repository import DocumentRepository


class AppContext:
    """Lazily wires the engine and repository for the running command."""

    def __init__(self, database_url: Optional[str] = None):
        self.settings = get_settings()
        if database_url:
            self.settings = self.settings.model_copy(update={"DATABASE_URL": database_url})
        self._repository: Optional[DocumentRepository] = None

    @property
    def engine(self):
        try:
            return init_engine(self.settings)
        except (SQLAlchemyError, ImportError) as exc:
            # Bad URL or missing driver package
            raise StoreError(f"Cannot open the store: {exc}") from exc

    @property
    def repository(self) -> DocumentRepository:
        if self._repository is None:
            self._repository = DocumentRepository(
                StoreGateway(self.engine), PathRewriter(self.settings.PATH_REWRITE_MODE)
            )
        return self._repository


pass_app = click.make_pass_decorator(AppContext)


def _fail(error: object) -> None:
    click.echo(f"❌ {error}", err=True)
    sys.exit(1)


def _echo_document(document: DomainDocument) -> None:
    status = f"archived {document.archived_date:%Y-%m-%d %H:%M}" if document.is_archived else "active"
    click.echo(f"[{document.id}] {document.name} ({status})")
    for v in document.versions:
        click.echo(f"  ├─ {v.created_date:%Y-%m-%d} {v.file_path}")
    if not document.versions:
        click.echo("  └─ (no versions)")


@click.group()
@click.option("--database-url", default=None, help="Override DATABASE_URL for this command")
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str]):
    """Document version store command line interface."""
    try:
        app = AppContext(database_url)
    except SettingsError as e:
        _fail(f"Invalid configuration: {e}")
    configure_logging(app.settings.LOG_LEVEL, app.settings.LOG_FILE)
    ctx.obj = app
    ctx.call_on_close(dispose_engine)


cli.add_command(config, name="config")


@cli.command()
def version():
    """Show docver version information."""
    try:
        installed = package_version("docver")
    except PackageNotFoundError:
        from docver import __version__ as installed
    click.echo(f"docver version {installed}")


@cli.command("init-db")
@pass_app
def init_db(app: AppContext):
    """Create the document and version tables."""
    try:
        create_schema(app.engine)
    except (DocumentStoreError, SQLAlchemyError) as e:
        _fail(e)
    click.echo("✅ Database schema is ready")


@cli.command("list")
@click.option("--active", is_flag=True, help="Hide archived documents")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@pass_app
def list_documents(app: AppContext, active: bool, as_json: bool):
    """List documents with their versions."""
    try:
        documents = app.repository.list_documents(include_archived=not active)
    except DocumentStoreError as e:
        _fail(e)

    if as_json:
        payload = [DocumentResponse.model_validate(d).model_dump(mode="json") for d in documents]
        click.echo(json.dumps(payload, indent=2))
        return

    if not documents:
        click.echo("No documents found")
    for document in documents:
        _echo_document(document)


@cli.command()
@click.argument("doc_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@pass_app
def show(app: AppContext, doc_id: int, as_json: bool):
    """Show one document and its versions."""
    try:
        document = app.repository.get_document(doc_id)
    except DocumentStoreError as e:
        _fail(e)

    if document is None:
        _fail(f"Document {doc_id} not found")
    if as_json:
        click.echo(DocumentResponse.model_validate(document).model_dump_json(indent=2))
    else:
        _echo_document(document)


@cli.command()
@click.argument("title")
@click.argument("created_date")
@click.argument("file_path")
@pass_app
def create(app: AppContext, title: str, created_date: str, file_path: str):
    """Create a document with its first version."""
    try:
        doc_id = app.repository.create_document(title, created_date, file_path)
    except DocumentStoreError as e:
        _fail(e)
    click.echo(f"✅ Created document {doc_id}")


@cli.command()
@click.argument("doc_id", type=int)
@click.argument("new_name")
@click.option("--json", "as_json", is_flag=True, help="Print the rename report as JSON")
@pass_app
def rename(app: AppContext, doc_id: int, new_name: str, as_json: bool):
    """Rename a document and rewrite its version paths."""
    try:
        report = app.repository.rename_document(doc_id, new_name)
    except DocumentStoreError as e:
        _fail(e)

    if as_json:
        click.echo(RenameResponse.model_validate(report).model_dump_json(indent=2))
        return

    for change in report.changes:
        click.echo(f"  {change.old_path} -> {change.new_path}")
    for anomaly in report.anomalies:
        click.echo(f"⚠️  {anomaly}")
    click.echo(f"✅ Renamed document {report.document_id} to {report.new_name}")


@cli.command("add-version")
@click.argument("doc_id", type=int)
@click.argument("created_date")
@click.argument("file_path")
@pass_app
def add_version(app: AppContext, doc_id: int, created_date: str, file_path: str):
    """Append a version to a document."""
    try:
        app.repository.add_version(doc_id, created_date, file_path)
    except DocumentStoreError as e:
        _fail(e)
    click.echo(f"✅ Added version to document {doc_id}")


@cli.command()
@click.argument("doc_id", type=int)
@pass_app
def archive(app: AppContext, doc_id: int):
    """Archive a document."""
    try:
        app.repository.archive_document(doc_id)
    except DocumentStoreError as e:
        _fail(e)
    click.echo(f"✅ Archived document {doc_id}")


def main():
    cli()


if __name__ == "__main__":
    main()
