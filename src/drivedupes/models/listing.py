"""Backend listing shapes used during folder traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional


class EntryKind(str, Enum):
    """What a listed child represents."""

    FILE = "file"
    FOLDER = "folder"
    # Neither a binary file nor a folder (native documents, shortcuts, ...).
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class ListingEntry:
    """
    One child entry returned by a backend's list-children call.

    child_count is None when the backend does not report how many children
    a folder has.
    """

    entry_id: Optional[str]
    kind: EntryKind

    name: Optional[str] = None
    child_count: Optional[int] = None
    size: Optional[int] = None
    url: Optional[str] = None
    parent_path: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    hashes: Mapping[str, Optional[str]] = field(default_factory=dict)

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER

    @property
    def is_empty_folder(self) -> bool:
        """True only when the backend reports a child count of zero."""
        return self.is_folder and self.child_count == 0


@dataclass(slots=True, frozen=True)
class FolderRef:
    """A pending folder on the traversal frontier."""

    folder_id: str
    container_id: str
    path: str = "/"
