"""SQLAlchemy-backed repository for documents and their versions."""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence, Union
from sqlalchemy import insert, select, update

from docver.application.interfaces.idocument_repository import DateInput, IDocumentRepository
from docver.application.services.exceptions import (
    DocumentNotFoundError,
    PathRewriteError,
    ValidationError,
    require,
)
from docver.application.services.path_rewriter import PATH_SEPARATOR, PathRewriter
from docver.domain.models import DomainDocument, DomainVersion, RenameReport
from docver.infrastructure.db.gateway import StoreGateway, StoreScope
from docver.infrastructure.entities import DocumentEntity, VersionEntity

document_table = DocumentEntity.__table__
version_table = VersionEntity.__table__


def parse_document_id(value: Union[int, str, None]) -> int:
    """Coerce a caller-supplied ID into a positive int.

    Raises:
        ValidationError: If the value is missing, not numeric or not positive
    """
    require(value, "id", "The document ID is required")
    if isinstance(value, bool):
        raise ValidationError("The document ID must be a number", "id")
    if isinstance(value, int):
        doc_id = value
    elif isinstance(value, str):
        try:
            doc_id = int(value.strip())
        except ValueError:
            raise ValidationError("The document ID must be a number", "id") from None
    else:
        raise ValidationError("The document ID must be a number", "id")

    if doc_id <= 0:
        raise ValidationError("The document ID must be a positive number", "id")
    return doc_id


def parse_created_date(value: DateInput) -> datetime:
    """Coerce a caller-supplied creation date into a datetime.

    Plain dates become midnight; strings must be ISO-8601.
    """
    require(value, "created_date", "The created date is required")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            # fromisoformat only reads a Z suffix from Python 3.11 on
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(
                f"The created date is not an ISO-8601 date: {value!r}", "created_date"
            ) from None
    raise ValidationError("The created date must be a date or a string", "created_date")


class DocumentRepository(IDocumentRepository):
    """Repository for documents and versions.

    Each public method borrows one scoped connection from the gateway and runs
    all of its statements in a single transaction. Inputs are validated before
    the store is touched.
    """

    def __init__(self, gateway: StoreGateway, path_rewriter: Optional[PathRewriter] = None):
        """Initialize the repository.

        Args:
            gateway: Source of scoped store connections
            path_rewriter: Plans version paths on rename, defaults to reconstruct mode
        """
        self.gateway = gateway
        self.path_rewriter = path_rewriter or PathRewriter()
        self.logger = logging.getLogger(__name__)

    def list_documents(self, include_archived: bool = True) -> List[DomainDocument]:
        with self.gateway.scope("An error occurred while getting the documents") as scope:
            return self._fetch_documents(scope, include_archived=include_archived)

    def get_document(self, doc_id: Union[int, str]) -> Optional[DomainDocument]:
        doc_id = parse_document_id(doc_id)
        with self.gateway.scope("An error occurred while getting the documents") as scope:
            documents = self._fetch_documents(scope, doc_id=doc_id)
        return documents[0] if documents else None

    def create_document(self, title: str, created_date: DateInput, file_path: str) -> int:
        require(title, "title", "The file name is required")
        if PATH_SEPARATOR in title:
            raise ValidationError(f"The file name must not contain {PATH_SEPARATOR!r}", "title")
        created = parse_created_date(created_date)
        require(file_path, "file_path", "The file path is required")

        with self.gateway.scope("An error occurred while creating the document") as scope:
            doc_id = scope.insert(insert(document_table).values(file_name=title))
            # Same transaction: a failure here also rolls back the document row
            scope.insert(
                insert(version_table).values(
                    doc_id=doc_id, file_path=file_path, created_date=created
                )
            )

        self.logger.info(f"Created document {doc_id} ({title!r}) with first version {file_path!r}")
        return doc_id

    def rename_document(self, doc_id: int, new_name: str) -> RenameReport:
        """Rename a document and move each version under the new name.

        The name update and every version path update commit together. Path
        updates are keyed by version ID, so versions sharing a path are each
        rewritten exactly once.

        Returns:
            RenameReport listing the rewritten paths. A document without
            versions is renamed anyway and reported as an anomaly.

        Raises:
            ValidationError: If the ID or the new name is invalid
            DocumentNotFoundError: If no document has this ID
            PathRewriteError: If a version path has no folder/filename; nothing is written
            StoreError: If a statement fails; nothing is written
        """
        doc_id = parse_document_id(doc_id)
        require(new_name, "name", "The file name is required")
        if PATH_SEPARATOR in new_name:
            raise ValidationError(
                f"The file name must not contain {PATH_SEPARATOR!r}", "name"
            )

        report = RenameReport(document_id=doc_id, new_name=new_name)
        with self.gateway.scope("An error occurred while updating the document name") as scope:
            result = scope.execute(
                update(document_table)
                .where(document_table.c.id == doc_id)
                .values(file_name=new_name)
            )
            if result.rowcount == 0:
                self.logger.warning(f"Rename requested for missing document {doc_id}")
                raise DocumentNotFoundError(doc_id)

            versions = self._fetch_versions(scope, doc_id)
            if not versions:
                message = f"No file paths found for document {doc_id}"
                self.logger.warning(message)
                report.anomalies.append(message)

            try:
                report.changes = self.path_rewriter.plan(versions, new_name)
            except PathRewriteError as exc:
                self.logger.error(f"Rename of document {doc_id} aborted: {exc}")
                raise

            for change in report.changes:
                scope.execute(
                    update(version_table)
                    .where(version_table.c.id == change.version_id)
                    .values(file_path=change.new_path)
                )

        self.logger.info(
            f"Renamed document {doc_id} to {new_name!r}, {len(report.changes)} version path(s) updated"
        )
        return report

    def add_version(self, doc_id: int, created_date: DateInput, file_path: str) -> None:
        doc_id = parse_document_id(doc_id)
        created = parse_created_date(created_date)
        require(file_path, "file_path", "The file path is required")

        with self.gateway.scope("An error occurred while adding the version") as scope:
            self._ensure_document_exists(scope, doc_id)
            scope.insert(
                insert(version_table).values(
                    doc_id=doc_id, file_path=file_path, created_date=created
                )
            )

        self.logger.info(f"Added version {file_path!r} to document {doc_id}")

    def archive_document(self, doc_id: int) -> None:
        doc_id = parse_document_id(doc_id)

        with self.gateway.scope("An error occurred while archiving the document") as scope:
            result = scope.execute(
                update(document_table)
                .where(document_table.c.id == doc_id)
                .values(archived_date=datetime.now(timezone.utc))
            )
            if result.rowcount == 0:
                self.logger.warning(f"Archive requested for missing document {doc_id}")
                raise DocumentNotFoundError(doc_id)

        self.logger.info(f"Archived document {doc_id}")

    def _fetch_documents(
        self,
        scope: StoreScope,
        doc_id: Optional[int] = None,
        include_archived: bool = True,
    ) -> List[DomainDocument]:
        """Select documents, then the versions of each, in one scope."""
        stmt = select(DocumentEntity).order_by(DocumentEntity.id)
        if doc_id is not None:
            stmt = stmt.where(DocumentEntity.id == doc_id)
        if not include_archived:
            stmt = stmt.where(DocumentEntity.archived_date.is_(None))

        documents = []
        for entity in scope.execute(stmt).scalars().all():
            versions = scope.execute(
                select(VersionEntity)
                .where(VersionEntity.doc_id == entity.id)
                .order_by(VersionEntity.created_date, VersionEntity.id)
            ).scalars().all()
            documents.append(entity.to_domain_document(versions))
        return documents

    def _fetch_versions(self, scope: StoreScope, doc_id: int) -> Sequence[DomainVersion]:
        rows = scope.execute(
            select(VersionEntity)
            .where(VersionEntity.doc_id == doc_id)
            .order_by(VersionEntity.created_date, VersionEntity.id)
        ).scalars().all()
        return [row.to_domain_version() for row in rows]

    def _ensure_document_exists(self, scope: StoreScope, doc_id: int) -> None:
        found = scope.execute(
            select(DocumentEntity.id).where(DocumentEntity.id == doc_id)
        ).scalar_one_or_none()
        if found is None:
            self.logger.warning(f"Version requested for missing document {doc_id}")
            raise DocumentNotFoundError(doc_id)
