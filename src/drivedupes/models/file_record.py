"""Immutable snapshot of one remote file, as consumed by duplicate grouping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional

# Google Drive content hashes, most often populated first.
HASH_KEYS: tuple[str, ...] = ("md5", "sha1", "sha256")

EMPTY_HASH: str = ""


@dataclass(slots=True, frozen=True)
class FileRecord:
    """
    Represents one file observed in the backend.

    Notes:
        - size is required and never negative.
        - hashes maps a hash key (see HASH_KEYS) to its value. Missing or None
          values read back as EMPTY_HASH through hash_value().
    """

    file_id: Optional[str]
    size: int

    name: Optional[str] = None
    url: Optional[str] = None
    parent_path: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    hashes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError("FileRecord.size must be an int")
        if self.size < 0:
            raise ValueError("FileRecord.size must be non-negative")

        normalized = {key: value or EMPTY_HASH for key, value in self.hashes.items()}
        object.__setattr__(self, "hashes", MappingProxyType(normalized))

    def __hash__(self) -> int:
        return hash((self.file_id, self.size))

    def hash_value(self, key: str) -> str:
        """Return the value of hash `key`, or EMPTY_HASH when unknown."""
        return self.hashes.get(key, EMPTY_HASH)


DuplicateGroup = list[FileRecord]
