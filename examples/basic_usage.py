"""
Basic example demonstrating how to use docver to track a document and its versions.
"""

from docver.application.services.path_rewriter import PathRewriter
from docver.config import get_settings
from docver.infrastructure.db.engine import create_schema, dispose_engine, init_engine
from docver.infrastructure.db.gateway import StoreGateway
from docver.infrastructure.logging_config import configure_logging
from docver.infrastructure.repositories.document_repository import DocumentRepository


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    # One engine for the whole process; each repository call borrows a connection
    engine = init_engine(settings)
    create_schema(engine)

    try:
        repo = DocumentRepository(
            StoreGateway(engine), PathRewriter(settings.PATH_REWRITE_MODE)
        )

        doc_id = repo.create_document("Report", "2024-01-01", "docs/Report/Report.docx")
        print(f"Created document {doc_id}")

        report = repo.rename_document(doc_id, "Report2")
        for change in report.changes:
            print(f"  {change.old_path} -> {change.new_path}")
        if not report.is_consistent:
            print("Rename anomalies:", report.anomalies)

        repo.add_version(doc_id, "2024-02-01", "docs/Report2/Report2_v2.docx")
        repo.archive_document(doc_id)

        document = repo.get_document(doc_id)
        print(f"{document.name} archived at {document.archived_date}")
        for version in document.versions:
            print(f"  {version.created_date:%Y-%m-%d} {version.file_path}")
    finally:
        dispose_engine()


if __name__ == "__main__":
    main()
