"""Listing capability a storage backend must provide to the tree enumerator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from drivedupes.models import ListingEntry

# Well-known alias for the top folder of a drive.
ROOT_FOLDER_ID: str = "root"


class ListingBackend(ABC):
    """
    Read-only access to one backend's folder hierarchy.

    Implementations raise drivedupes.errors.BackendError (or a subclass) when
    a call fails, after whatever retrying they choose to do.
    """

    @abstractmethod
    def resolve_container_id(self) -> str:
        """Return the id of the drive/container the folders belong to."""

    @abstractmethod
    def list_children(self, container_id: str, folder_id: str) -> Iterator[list[ListingEntry]]:
        """
        Lazily yield the direct children of `folder_id`, one list per page.

        The sequence is forward-only; callers must drain it to see every child.
        """
