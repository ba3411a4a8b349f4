from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"
SHORTCUT_MIME: str = "application/vnd.google-apps.shortcut"

GOOGLE_APP_PREFIX: str = "application/vnd.google-apps."


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_google_app(mime_type: str) -> bool:
    """
    Returns True for Google-native types (Docs, Sheets, shortcuts, ...).

    These items have no binary content on Drive: no size and no checksums.
    """
    return mime_type.startswith(GOOGLE_APP_PREFIX)


def is_binary_file(mime_type: str) -> bool:
    """Returns True if the item is an ordinary uploaded file."""
    return not is_google_app(mime_type)
