"""Public model exports for drivedupes."""

from __future__ import annotations

from .file_record import EMPTY_HASH, HASH_KEYS, DuplicateGroup, FileRecord
from .listing import EntryKind, FolderRef, ListingEntry

__all__ = [
    "FileRecord",
    "DuplicateGroup",
    "HASH_KEYS",
    "EMPTY_HASH",
    "EntryKind",
    "ListingEntry",
    "FolderRef",
]
