"""
Domain models package.
"""

from .models import DomainDocument, DomainVersion, PathChange, RenameReport

__all__ = ["DomainDocument", "DomainVersion", "PathChange", "RenameReport"]
