"""DuplicateFileFinder: reads every file from a source, then groups duplicates."""

from __future__ import annotations

import logging
from typing import Sequence

from drivedupes.backend import GoogleDriveBackend, RetryPolicy
from drivedupes.config import FinderConfig
from drivedupes.enumerator import TreeEnumerator
from drivedupes.grouping import DuplicateGroupingEngine
from drivedupes.models import HASH_KEYS, DuplicateGroup
from drivedupes.source import FileSource

logger = logging.getLogger(__name__)


class DuplicateFileFinder:
    """High-level entry point: FileSource -> duplicate groups."""

    def __init__(
        self,
        file_source: FileSource,
        *,
        hash_keys: Sequence[str] = HASH_KEYS,
    ) -> None:
        self._file_source = file_source
        self._engine = DuplicateGroupingEngine(hash_keys)

    @classmethod
    def from_config(cls, config: FinderConfig) -> "DuplicateFileFinder":
        """Wire a Google Drive backend and tree enumerator from `config`."""
        backend = GoogleDriveBackend(
            config.auth_info,
            shared_drive_id=config.shared_drive_id,
            page_size=config.page_size,
            retry_policy=RetryPolicy(max_retries=config.max_retries),
        )
        enumerator = TreeEnumerator(
            backend,
            root_folder_ids=config.root_folder_ids,
            trust_child_count=config.trust_child_count,
        )
        return cls(enumerator, hash_keys=config.hash_keys)

    @property
    def file_source(self) -> FileSource:
        return self._file_source

    @property
    def hash_keys(self) -> tuple[str, ...]:
        """Hash keys used for grouping, in matching order."""
        return self._engine.hash_keys

    def get_duplicate_files(self) -> list[DuplicateGroup]:
        """
        Read the complete file list and return the likely-duplicate groups.

        Errors raised by the file source propagate unchanged; no grouping is
        attempted on an incomplete list.
        """
        files = self._file_source.get_files()
        groups = self._engine.find_duplicates(files)
        logger.info("%d potential duplicate groups among %d files", len(groups), len(files))
        return groups
