"""Console front end: print the potential duplicate groups of a Google Drive."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence, TextIO

from drivedupes.config import FinderConfig
from drivedupes.errors import DriveDupesError
from drivedupes.finder import DuplicateFileFinder
from drivedupes.models import DuplicateGroup, FileRecord
from drivedupes.util.time import to_rfc3339

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drivedupes",
        description="List groups of likely duplicate files in Google Drive. Nothing is modified.",
        epilog="Unset options fall back to DRIVEDUPES_* environment variables.",
    )
    parser.add_argument("--client-secrets", help="OAuth client secrets JSON file")
    parser.add_argument("--token-file", help="OAuth token JSON file (created if missing)")
    parser.add_argument(
        "--folder-id",
        action="append",
        dest="folder_ids",
        metavar="ID",
        help="Folder to scan (repeatable). Default: the drive root",
    )
    parser.add_argument("--shared-drive-id", help="Scan this shared drive instead of My Drive")
    parser.add_argument(
        "--hash-keys",
        help="Comma-separated hash keys in matching order (default: md5,sha1,sha256)",
    )
    parser.add_argument(
        "--no-trust-child-count",
        action="store_true",
        help="List every folder even when the backend reports it as empty",
    )
    parser.add_argument("--json", action="store_true", help="Print groups as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_config(args: argparse.Namespace) -> FinderConfig:
    hash_keys = None
    if args.hash_keys:
        hash_keys = tuple(k.strip() for k in args.hash_keys.split(",") if k.strip())

    return FinderConfig.from_env(
        client_secrets_file=args.client_secrets,
        token_file=args.token_file,
        root_folder_ids=tuple(args.folder_ids) if args.folder_ids else None,
        shared_drive_id=args.shared_drive_id,
        hash_keys=hash_keys,
        trust_child_count=False if args.no_trust_child_count else None,
    )


def format_file_line(file: FileRecord, hash_keys: Sequence[str]) -> str:
    parts = [
        file.name or "",
        file.url or "",
        file.parent_path or "",
        to_rfc3339(file.created_time) if file.created_time else "",
        to_rfc3339(file.modified_time) if file.modified_time else "",
        f"{file.size}B",
    ]
    parts.extend(file.hash_value(key) for key in hash_keys)
    return " ".join(parts)


def write_text_report(
    groups: list[DuplicateGroup],
    hash_keys: Sequence[str],
    out: TextIO,
) -> None:
    out.write(f"{len(groups)} potential duplicate groups found.\n")
    for number, group in enumerate(groups, start=1):
        out.write(f"Group {number}:\n")
        for file in group:
            out.write(format_file_line(file, hash_keys) + "\n")
        out.write("\n")


def file_to_dict(file: FileRecord) -> dict[str, Any]:
    return {
        "id": file.file_id,
        "name": file.name,
        "url": file.url,
        "parent_path": file.parent_path,
        "created_time": to_rfc3339(file.created_time) if file.created_time else None,
        "modified_time": to_rfc3339(file.modified_time) if file.modified_time else None,
        "size": file.size,
        "hashes": dict(file.hashes),
    }


def write_json_report(groups: list[DuplicateGroup], out: TextIO) -> None:
    json.dump([[file_to_dict(f) for f in group] for group in groups], out, indent=2)
    out.write("\n")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    finder: Optional[DuplicateFileFinder] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        config = load_config(args)
        if finder is None:
            finder = DuplicateFileFinder.from_config(config)
        groups = finder.get_duplicate_files()
    except DriveDupesError as exc:
        logger.debug("Run aborted", exc_info=True)
        err.write(f"{exc.__class__.__name__}: {exc}\n")
        if exc.details:
            context = ", ".join(f"{k}={v}" for k, v in exc.details.items() if v is not None)
            err.write(f"  ({context})\n")
        return 1

    if args.json:
        write_json_report(groups, out)
    else:
        write_text_report(groups, finder.hash_keys, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
