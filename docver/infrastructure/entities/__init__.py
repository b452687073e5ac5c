from .entity_base import EntityBase
from .version import VersionEntity
from .document import DocumentEntity

__all__ = ["EntityBase", "DocumentEntity", "VersionEntity"]
