from datetime import datetime
from typing import Generator
import pytest
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from docver.infrastructure.db.engine import build_engine, create_schema
from docver.infrastructure.db.gateway import StoreGateway
from docver.infrastructure.repositories.document_repository import DocumentRepository


@pytest.fixture
def test_engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database for each test.

    StaticPool keeps a single connection so every scope sees the same data.
    """
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def gateway(test_engine: Engine) -> StoreGateway:
    return StoreGateway(test_engine)


@pytest.fixture
def document_repo(gateway: StoreGateway) -> DocumentRepository:
    return DocumentRepository(gateway)


@pytest.fixture
def report_doc_id(document_repo: DocumentRepository) -> int:
    """A document named 'Report' with a single version."""
    return document_repo.create_document(
        "Report", datetime(2024, 1, 1), "docs/Report/Report.docx"
    )


def count_rows(engine: Engine, table: str) -> int:
    """Count rows with a connection outside the repository."""
    with engine.connect() as conn:
        return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()


@pytest.fixture
def row_counter(test_engine: Engine):
    def counter(table: str) -> int:
        return count_rows(test_engine, table)

    return counter
