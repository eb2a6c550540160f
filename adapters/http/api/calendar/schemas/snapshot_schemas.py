"""Import/export/backup schemas."""

from typing import Literal, Optional
from pydantic import BaseModel


class ImportRequest(BaseModel):
    importData: Optional[dict] = None
    mergeMode: Literal["replace", "merge"] = "replace"


class ImportResponse(BaseModel):
    success: bool
    message: str
    events_imported: int
    emojis_restored: int
    backupFile: Optional[str] = None


class BackupResponse(BaseModel):
    success: bool
    message: str
    backupFile: str
