"""Entity model for documents."""

from datetime import datetime
from typing import Optional, Sequence
from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .entity_base import EntityBase
from .version import VersionEntity
from docver.domain.models import DomainDocument

__all__ = ["DocumentEntity"]


class DocumentEntity(EntityBase):
    """Database model for documents.

    A document row only carries the logical name and the archive marker;
    its file artifacts live in the ``version`` table.
    """

    __tablename__ = "document"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    file_name: Mapped[str] = mapped_column(Text, nullable=False)
    archived_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def to_domain_document(
        self, versions: Sequence[VersionEntity] = ()
    ) -> DomainDocument:
        """Convert to domain model.

        Args:
            versions: Version rows owned by this document, already ordered

        Returns:
            Domain model representation of this document
        """
        return DomainDocument(
            id=self.id,
            name=self.file_name,
            archived_date=self.archived_date,
            versions=[version.to_domain_version() for version in versions],
        )
