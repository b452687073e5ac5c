"""
Helper module for setting up repositories with minimal configuration.
"""

from dataclasses import dataclass
from typing import Optional
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from docver.application.services.path_rewriter import PathRewriter, RewriteMode
from docver.infrastructure.db.engine import build_engine, create_schema
from docver.infrastructure.db.gateway import StoreGateway
from docver.infrastructure.repositories.document_repository import DocumentRepository


@dataclass
class Repositories:
    engine: Engine
    gateway: StoreGateway
    document_repo: DocumentRepository


def setup_repositories(
    db_url: str = "sqlite://",
    mode: RewriteMode = "reconstruct",
    engine: Optional[Engine] = None,
) -> Repositories:
    """
    Set up repositories, by default over an in-memory SQLite database.

    Args:
        db_url: Database URL. Defaults to in-memory SQLite.
        mode: Filename mode used by the rename cascade
        engine: Existing engine to reuse instead of building one from db_url

    Returns:
        Repositories bundle sharing one engine
    """
    if engine is None:
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            # Every pooled checkout must see the same in-memory database
            engine = build_engine(
                db_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = build_engine(db_url)
    create_schema(engine)

    gateway = StoreGateway(engine)
    return Repositories(
        engine=engine,
        gateway=gateway,
        document_repo=DocumentRepository(gateway, PathRewriter(mode)),
    )
