"""File Data Transfer Objects."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecordStatus(str, Enum):
    LIVE = "live"
    ARCHIVED = "archived"


class FileRecord(BaseModel):
    """A node of the virtual filesystem.

    ``content`` is ``None`` when the record comes from a directory listing,
    which only loads metadata.
    """

    id: int
    dir: str
    file_name: str
    size: int = Field(ge=0)
    content: bytes | None = None
    is_archived: bool = False
    created_at: datetime
    last_modified: datetime

    @property
    def status(self) -> RecordStatus:
        return RecordStatus.ARCHIVED if self.is_archived else RecordStatus.LIVE


class DirectoryListing(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_directory: bool = Field(default=True, serialization_alias="isDirectory")
    files: list[str] = []
