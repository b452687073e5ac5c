"""Core domain models for the document version store."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class DomainVersion:
    """One stored revision of a document."""

    id: int
    document_id: int
    file_path: str
    created_date: datetime


@dataclass
class DomainDocument:
    """A named document and its versions, oldest first."""

    id: int
    name: str
    archived_date: Optional[datetime] = None
    versions: List[DomainVersion] = field(default_factory=list)

    @property
    def is_archived(self) -> bool:
        return self.archived_date is not None

    @property
    def latest_version(self) -> Optional[DomainVersion]:
        """Most recently created version, or None for an inconsistent document."""
        return self.versions[-1] if self.versions else None


@dataclass(frozen=True)
class PathChange:
    """A single version path rewritten by a rename."""

    version_id: int
    old_path: str
    new_path: str


@dataclass
class RenameReport:
    """Outcome of a rename cascade.

    ``anomalies`` holds conditions that did not abort the rename but leave the
    document in a state callers may want to reconcile, such as a document
    without any versions.
    """

    document_id: int
    new_name: str
    changes: List[PathChange] = field(default_factory=list)
    anomalies: List[str] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not self.anomalies
