"""Interface for document repository operations."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional, Union
from docver.domain.models import DomainDocument, RenameReport

DateInput = Union[datetime, date, str]


class IDocumentRepository(ABC):
    """Repository interface for documents and their versions.

    Defines how the application reads and writes documents. The actual
    implementation belongs in the infrastructure layer.
    """

    @abstractmethod
    def list_documents(self, include_archived: bool = True) -> List[DomainDocument]:
        """Retrieve every document with its versions.

        Args:
            include_archived: Whether archived documents are part of the result

        Returns:
            The documents, each with its versions oldest first
        """
        pass

    @abstractmethod
    def get_document(self, doc_id: Union[int, str]) -> Optional[DomainDocument]:
        """Retrieve a document by its ID.

        Args:
            doc_id: Positive integer ID, or its decimal string form

        Returns:
            The document if found, None otherwise
        """
        pass

    @abstractmethod
    def create_document(self, title: str, created_date: DateInput, file_path: str) -> int:
        """Create a document together with its first version.

        Args:
            title: Logical name of the document
            created_date: Creation timestamp of the first version
            file_path: Stored path of the first version

        Returns:
            The generated document ID
        """
        pass

    @abstractmethod
    def rename_document(self, doc_id: int, new_name: str) -> RenameReport:
        """Rename a document and rewrite the path of each of its versions.

        Args:
            doc_id: The ID of the document to rename
            new_name: The new logical name

        Returns:
            Report of the rewritten paths and any anomaly found
        """
        pass

    @abstractmethod
    def add_version(self, doc_id: int, created_date: DateInput, file_path: str) -> None:
        """Append a version to an existing document.

        Args:
            doc_id: The ID of the owning document
            created_date: Creation timestamp of the version
            file_path: Stored path of the version
        """
        pass

    @abstractmethod
    def archive_document(self, doc_id: int) -> None:
        """Mark a document archived as of now.

        Args:
            doc_id: The ID of the document to archive
        """
        pass
