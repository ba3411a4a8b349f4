"""drivedupes public API."""

from __future__ import annotations

from drivedupes.auth import AuthInfo, OAuthClient
from drivedupes.backend import ROOT_FOLDER_ID, GoogleDriveBackend, ListingBackend, RetryPolicy
from drivedupes.config import FinderConfig
from drivedupes.enumerator import TreeEnumerator
from drivedupes.errors import (
    ApiError,
    AuthError,
    BackendError,
    DataIntegrityError,
    DriveDupesError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)
from drivedupes.finder import DuplicateFileFinder
from drivedupes.grouping import DuplicateGroupingEngine, find_duplicates
from drivedupes.models import (
    HASH_KEYS,
    DuplicateGroup,
    EntryKind,
    FileRecord,
    FolderRef,
    ListingEntry,
)
from drivedupes.source import FileSource

__all__ = [
    # High-level
    "DuplicateFileFinder",
    "FinderConfig",
    # Core
    "TreeEnumerator",
    "DuplicateGroupingEngine",
    "find_duplicates",
    "FileSource",
    # Backend / Auth
    "ListingBackend",
    "GoogleDriveBackend",
    "RetryPolicy",
    "ROOT_FOLDER_ID",
    "AuthInfo",
    "OAuthClient",
    # Models
    "FileRecord",
    "DuplicateGroup",
    "HASH_KEYS",
    "EntryKind",
    "ListingEntry",
    "FolderRef",
    # Errors
    "DriveDupesError",
    "InvalidArgumentError",
    "DataIntegrityError",
    "BackendError",
    "AuthError",
    "PermissionError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
