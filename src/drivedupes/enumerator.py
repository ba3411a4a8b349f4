"""Iterative, all-or-nothing enumeration of every file under a set of folders."""

from __future__ import annotations

import logging
import posixpath
from typing import Optional, Sequence

from drivedupes.backend.base import ROOT_FOLDER_ID, ListingBackend
from drivedupes.errors import BackendError, DataIntegrityError, InvalidArgumentError
from drivedupes.models import FileRecord, FolderRef, ListingEntry
from drivedupes.source import FileSource

logger = logging.getLogger(__name__)


class TreeEnumerator(FileSource):
    """
    Walks folder trees of one backend and collects every file found.

    Notes:
        - Folders are listed one at a time through an explicit LIFO frontier,
          so tree depth never grows the Python call stack.
        - Every page of a folder listing is consumed before the next folder
          is popped.
        - Any failure aborts the run; no partial list is ever returned.
        - An instance must not run two enumerations at the same time.
    """

    def __init__(
        self,
        backend: ListingBackend,
        *,
        root_folder_ids: Optional[Sequence[str]] = None,
        trust_child_count: bool = True,
    ) -> None:
        self._backend = backend
        self._root_folder_ids = _normalize_root_ids(root_folder_ids)
        self._trust_child_count = trust_child_count

    @property
    def root_folder_ids(self) -> tuple[str, ...]:
        return self._root_folder_ids

    def get_files(self) -> list[FileRecord]:
        return self.enumerate_files(self._root_folder_ids)

    def enumerate_files(self, root_folder_ids: Optional[Sequence[str]] = None) -> list[FileRecord]:
        """
        Return every file reachable from the given folders.

        Args:
            root_folder_ids: Starting folder ids. Defaults to the drive root.

        Raises:
            BackendError: if the container id cannot be resolved or any
                folder listing fails. details carries container_id/folder_id.
            DataIntegrityError: if a file lacks a size or a folder to descend
                into lacks an id.
        """
        roots = _normalize_root_ids(root_folder_ids)

        container_id = self._backend.resolve_container_id()

        files: list[FileRecord] = []
        frontier: list[FolderRef] = [
            FolderRef(folder_id=folder_id, container_id=container_id) for folder_id in roots
        ]
        visited: set[str] = set()

        while frontier:
            folder = frontier.pop()
            if folder.folder_id in visited:
                continue
            visited.add(folder.folder_id)

            self._process_folder(folder, files, frontier)

        logger.info(
            "Enumerated %d files in %d folders (container %s)",
            len(files),
            len(visited),
            container_id,
        )
        return files

    def _process_folder(
        self,
        folder: FolderRef,
        files: list[FileRecord],
        frontier: list[FolderRef],
    ) -> None:
        logger.debug("Listing folder %s (%s)", folder.folder_id, folder.path)

        try:
            for page in self._backend.list_children(folder.container_id, folder.folder_id):
                for entry in page:
                    if entry.is_file:
                        files.append(_entry_to_file_record(entry, folder))
                    elif entry.is_folder:
                        child = self._child_folder(entry, folder)
                        if child is not None:
                            frontier.append(child)
        except BackendError as exc:
            exc.details.setdefault("container_id", folder.container_id)
            exc.details.setdefault("folder_id", folder.folder_id)
            raise

    def _child_folder(self, entry: ListingEntry, parent: FolderRef) -> Optional[FolderRef]:
        if self._trust_child_count and entry.is_empty_folder:
            return None

        if not entry.entry_id:
            raise DataIntegrityError(
                "Listed folder has no id",
                details={
                    "folder_id": parent.folder_id,
                    "entry_name": entry.name,
                    "field": "id",
                },
            )

        return FolderRef(
            folder_id=entry.entry_id,
            container_id=parent.container_id,
            path=posixpath.join(parent.path, entry.name or entry.entry_id),
        )


def _normalize_root_ids(root_folder_ids: Optional[Sequence[str]]) -> tuple[str, ...]:
    if root_folder_ids is None:
        return (ROOT_FOLDER_ID,)
    if isinstance(root_folder_ids, str):
        raise InvalidArgumentError("root_folder_ids must be a sequence of ids, not a string")

    roots = tuple(root_folder_ids)
    if not roots:
        return (ROOT_FOLDER_ID,)
    if not all(isinstance(r, str) and r.strip() for r in roots):
        raise InvalidArgumentError(
            "root_folder_ids must contain non-empty strings",
            details={"root_folder_ids": list(roots)},
        )
    return roots


def _entry_to_file_record(entry: ListingEntry, folder: FolderRef) -> FileRecord:
    if entry.size is None or entry.size < 0:
        raise DataIntegrityError(
            "Listed file has no valid size",
            details={
                "folder_id": folder.folder_id,
                "entry_id": entry.entry_id,
                "field": "size",
            },
        )

    return FileRecord(
        file_id=entry.entry_id,
        size=entry.size,
        name=entry.name,
        url=entry.url,
        parent_path=entry.parent_path or folder.path,
        created_time=entry.created_time,
        modified_time=entry.modified_time,
        hashes={key: value or "" for key, value in entry.hashes.items()},
    )
