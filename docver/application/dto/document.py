from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime


class VersionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    document_id: int
    file_path: str
    created_date: datetime


class DocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    archived_date: Optional[datetime] = None
    versions: List[VersionResponse]


class PathChangeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    version_id: int
    old_path: str
    new_path: str


class RenameResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    document_id: int
    new_name: str
    changes: List[PathChangeResponse]
    anomalies: List[str]
