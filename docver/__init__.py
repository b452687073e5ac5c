"""
docver: a relational store for documents and their versioned file artifacts.
"""

from docver.application.services.exceptions import (
    DocumentNotFoundError,
    DocumentStoreError,
    PathRewriteError,
    StoreError,
    ValidationError,
)
from docver.application.services.path_rewriter import PathRewriter, rewrite_path
from docver.config import Settings, get_settings
from docver.domain.models import DomainDocument, DomainVersion, PathChange, RenameReport
from docver.infrastructure.db.gateway import StoreGateway
from docver.infrastructure.repositories.document_repository import DocumentRepository

__version__ = "0.1.0"

__all__ = [
    "DocumentRepository",
    "StoreGateway",
    "PathRewriter",
    "rewrite_path",
    "DomainDocument",
    "DomainVersion",
    "PathChange",
    "RenameReport",
    "DocumentStoreError",
    "ValidationError",
    "StoreError",
    "DocumentNotFoundError",
    "PathRewriteError",
    "Settings",
    "get_settings",
]
