"""Entity model for document versions."""

from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .entity_base import EntityBase
from docver.domain.models import DomainVersion

__all__ = ["VersionEntity"]


class VersionEntity(EntityBase):
    """Database model for a stored revision of a document."""

    __tablename__ = "version"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    doc_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("document.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    file_path: Mapped[str] = mapped_column(Text, nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def to_domain_version(self) -> DomainVersion:
        """Convert to domain model."""
        return DomainVersion(
            id=self.id,
            document_id=self.doc_id,
            file_path=self.file_path,
            created_date=self.created_date,
        )
