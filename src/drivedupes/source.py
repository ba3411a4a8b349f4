"""The file-source seam between storage backends and duplicate grouping."""

from __future__ import annotations

from abc import ABC, abstractmethod

from drivedupes.models import FileRecord


class FileSource(ABC):
    """Anything that can produce the complete list of files to analyze."""

    @abstractmethod
    def get_files(self) -> list[FileRecord]:
        """
        Return every file of the source.

        Raises:
            DriveDupesError: if the list cannot be produced completely.
        """
