"""
Progressive duplicate grouping: by size, then by each hash key in turn.

Hashes are not reliably populated by the backend, so a file whose value for
a hash key is empty stays a candidate duplicate of every other file in its
group instead of being dropped.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from drivedupes.errors import InvalidArgumentError
from drivedupes.models import EMPTY_HASH, HASH_KEYS, DuplicateGroup, FileRecord

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class DuplicateGroupingEngine:
    """Groups file records into likely-duplicate groups of two or more."""

    def __init__(self, hash_keys: Sequence[str] = HASH_KEYS) -> None:
        self._hash_keys = validate_hash_keys(hash_keys)

    @property
    def hash_keys(self) -> tuple[str, ...]:
        return self._hash_keys

    def find_duplicates(self, files: Iterable[FileRecord]) -> list[DuplicateGroup]:
        """
        Return every group of likely duplicates.

        Groups come out in size discovery order, then hash sub-partition
        order. A file with a unique size never appears in any group.
        """
        duplicates: list[DuplicateGroup] = []
        candidates = 0

        for size_group in group_by_size(files).values():
            if len(size_group) < 2:
                continue
            candidates += len(size_group)
            duplicates.extend(self._refine_by_hashes(size_group))

        logger.debug(
            "%d size-matched candidates refined into %d duplicate groups",
            candidates,
            len(duplicates),
        )
        return duplicates

    def _refine_by_hashes(self, files: list[FileRecord]) -> list[DuplicateGroup]:
        groups: list[DuplicateGroup] = [files]

        for key in self._hash_keys:
            refined: list[DuplicateGroup] = []
            for group in groups:
                for subgroup in group_by_hash(group, key).values():
                    if len(subgroup) > 1:
                        refined.append(subgroup)
            groups = refined
            if not groups:
                break

        return groups


def find_duplicates(
    files: Iterable[FileRecord],
    hash_keys: Sequence[str] = HASH_KEYS,
) -> list[DuplicateGroup]:
    """Shortcut for DuplicateGroupingEngine(hash_keys).find_duplicates(files)."""
    return DuplicateGroupingEngine(hash_keys).find_duplicates(files)


def group_by_size(files: Iterable[FileRecord]) -> dict[int, list[FileRecord]]:
    """Partition files by size, keeping first-seen order."""
    return _group_by(files, lambda f: f.size)


def group_by_hash(files: Iterable[FileRecord], key: str) -> dict[str, list[FileRecord]]:
    """
    Partition files by the value of hash `key`.

    Files with an empty value are appended to every other bucket and their
    own bucket is removed. When every file lacks the hash, the single empty
    bucket is returned unchanged so later keys can still split it.
    """
    groups = _group_by(files, lambda f: f.hash_value(key))

    if EMPTY_HASH in groups and len(groups) > 1:
        unresolved = groups.pop(EMPTY_HASH)
        for group in groups.values():
            group.extend(unresolved)

    return groups


def validate_hash_keys(hash_keys: Sequence[str]) -> tuple[str, ...]:
    if isinstance(hash_keys, str):
        raise InvalidArgumentError("hash_keys must be a sequence of names, not a string")
    keys = tuple(hash_keys)
    if not keys or not all(isinstance(k, str) and k.strip() for k in keys):
        raise InvalidArgumentError(
            "hash_keys must be a non-empty sequence of non-empty strings",
            details={"hash_keys": list(keys)},
        )
    return keys


def _group_by(
    files: Iterable[FileRecord],
    key_func: Callable[[FileRecord], K],
) -> dict[K, list[FileRecord]]:
    groups: defaultdict[K, list[FileRecord]] = defaultdict(list)
    for file in files:
        groups[key_func(file)].append(file)
    return dict(groups)
