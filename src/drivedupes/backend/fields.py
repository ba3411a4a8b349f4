"""Field selections for Google Drive API requests."""

from __future__ import annotations

ENTRY_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "size,"
    "webViewLink,"
    "createdTime,"
    "modifiedTime,"
    "md5Checksum,"
    "sha1Checksum,"
    "sha256Checksum"
)

LIST_FIELDS: str = f"nextPageToken,files({ENTRY_FIELDS})"

# Drive response field -> hash key used by FileRecord.hashes.
HASH_FIELDS: tuple[tuple[str, str], ...] = (
    ("md5Checksum", "md5"),
    ("sha1Checksum", "sha1"),
    ("sha256Checksum", "sha256"),
)
