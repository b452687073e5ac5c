import pytest
from typing import List, Optional, Union
from docver.application.interfaces.idocument_repository import DateInput, IDocumentRepository
from docver.domain.models import DomainDocument, RenameReport
from docver.infrastructure.repositories.document_repository import DocumentRepository


def test_idocument_repository_is_abstract():
    with pytest.raises(TypeError):
        IDocumentRepository()  # type: ignore


def test_idocument_repository_partial_subclass_is_abstract():
    class ReadOnlyRepo(IDocumentRepository):
        def list_documents(self, include_archived: bool = True) -> List[DomainDocument]:
            return []

        def get_document(self, doc_id: Union[int, str]) -> Optional[DomainDocument]:
            return None

    with pytest.raises(TypeError):
        ReadOnlyRepo()  # type: ignore


def test_idocument_repository_minimal_subclass():
    class MinimalDocumentRepo(IDocumentRepository):
        def list_documents(self, include_archived: bool = True) -> List[DomainDocument]:
            return []

        def get_document(self, doc_id: Union[int, str]) -> Optional[DomainDocument]:
            return None

        def create_document(self, title: str, created_date: DateInput, file_path: str) -> int:
            return 1

        def rename_document(self, doc_id: int, new_name: str) -> RenameReport:
            return RenameReport(document_id=doc_id, new_name=new_name)

        def add_version(self, doc_id: int, created_date: DateInput, file_path: str) -> None:
            pass

        def archive_document(self, doc_id: int) -> None:
            pass

    repo = MinimalDocumentRepo()
    assert repo.create_document("A", "2024-01-01", "docs/A/A.pdf") == 1
    assert repo.rename_document(1, "B").is_consistent


def test_document_repository_implements_interface():
    assert issubclass(DocumentRepository, IDocumentRepository)
