from .mime import FOLDER_MIME, SHORTCUT_MIME, is_binary_file, is_folder, is_google_app
from .time import normalize_dt, parse_rfc3339, parse_rfc3339_or_none, to_rfc3339

__all__ = [
    "FOLDER_MIME",
    "SHORTCUT_MIME",
    "is_folder",
    "is_google_app",
    "is_binary_file",
    "parse_rfc3339",
    "parse_rfc3339_or_none",
    "to_rfc3339",
    "normalize_dt",
]
