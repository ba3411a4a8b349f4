"""Storage backend exports for drivedupes."""

from __future__ import annotations

from .base import ROOT_FOLDER_ID, ListingBackend
from .drive import GoogleDriveBackend, RetryPolicy

__all__ = ["ListingBackend", "GoogleDriveBackend", "RetryPolicy", "ROOT_FOLDER_ID"]
