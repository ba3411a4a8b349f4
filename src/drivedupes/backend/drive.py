"""Google Drive v3 implementation of the listing backend."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

from googleapiclient.errors import HttpError

from drivedupes.auth import READONLY_SCOPES, AuthInfo, OAuthClient
from drivedupes.errors import (
    ApiError,
    BackendError,
    HttpErrorInfo,
    NetworkError,
    RateLimitError,
    map_http_error,
)
from drivedupes.models import EntryKind, ListingEntry
from drivedupes.util.mime import is_binary_file, is_folder
from drivedupes.util.time import parse_rfc3339_or_none

from .base import ROOT_FOLDER_ID, ListingBackend
from .fields import HASH_FIELDS, LIST_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_PAGE_SIZE: int = 1000


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3
    initial_delay_sec: float = 1.0


class GoogleDriveBackend(ListingBackend):
    """
    Lists folders of "My Drive" or of one shared drive.

    Notes:
        - Trashed items are never listed.
        - Transient failures (rate limits, network errors, 5xx) are retried
          with exponential backoff before a BackendError is raised.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        shared_drive_id: Optional[str] = None,
        page_size: int = MAX_PAGE_SIZE,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        use_scopes = list(scopes) if scopes is not None else list(READONLY_SCOPES)
        service = OAuthClient(auth_info).build_drive_service(use_scopes)
        self._init(service, shared_drive_id, page_size, retry_policy)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        shared_drive_id: Optional[str] = None,
        page_size: int = MAX_PAGE_SIZE,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> "GoogleDriveBackend":
        """Create backend from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._init(service, shared_drive_id, page_size, retry_policy)
        return obj

    def _init(
        self,
        service: Any,
        shared_drive_id: Optional[str],
        page_size: int,
        retry_policy: Optional[RetryPolicy],
    ) -> None:
        self._service = service
        self._shared_drive_id = shared_drive_id
        self._page_size = max(1, min(page_size, MAX_PAGE_SIZE))
        self._retry_policy = retry_policy or RetryPolicy()

    # ----------------------------
    # ListingBackend
    # ----------------------------
    def resolve_container_id(self) -> str:
        if self._shared_drive_id:
            req = self._service.drives().get(driveId=self._shared_drive_id, fields="id")
            details = {"container_id": self._shared_drive_id}
        else:
            req = self._service.files().get(fileId=ROOT_FOLDER_ID, fields="id")
            details = {"container_id": ROOT_FOLDER_ID}

        data = self._execute(req.execute, details)
        container_id = data.get("id") if isinstance(data, dict) else None
        if not isinstance(container_id, str) or not container_id:
            raise ApiError("Drive did not return a container id", details=details)

        logger.debug("Resolved container id %s", container_id)
        return container_id

    def list_children(self, container_id: str, folder_id: str) -> Iterator[list[ListingEntry]]:
        if self._shared_drive_id and folder_id == ROOT_FOLDER_ID:
            # The root folder of a shared drive has the drive's id.
            folder_id = container_id

        q = _build_parent_query(folder_id)
        details = {"container_id": container_id, "folder_id": folder_id}
        page_token: Optional[str] = None

        while True:
            req = self._service.files().list(
                q=q,
                fields=LIST_FIELDS,
                pageSize=self._page_size,
                pageToken=page_token,
                **self._list_kwargs(container_id),
            )
            data = self._execute(req.execute, details)
            yield [_file_dict_to_entry(f) for f in data.get("files", []) or []]

            page_token = data.get("nextPageToken")
            if not page_token:
                break

    # ----------------------------
    # Internals
    # ----------------------------
    def _list_kwargs(self, container_id: str) -> dict[str, Any]:
        if not self._shared_drive_id:
            return {"spaces": "drive"}
        return {
            "corpora": "drive",
            "driveId": container_id,
            "supportsAllDrives": True,
            "includeItemsFromAllDrives": True,
        }

    def _execute(self, func: Callable[[], T], details: dict[str, Any]) -> T:
        delay = self._retry_policy.initial_delay_sec
        for attempt in range(self._retry_policy.max_retries + 1):
            try:
                return func()
            except Exception as exc:
                mapped = _map_exception(exc)
                mapped.details.update(details)
                if _should_retry(mapped) and attempt < self._retry_policy.max_retries:
                    logger.warning(
                        "Drive call failed (%s), retrying in %.1fs (attempt %d/%d)",
                        mapped.__class__.__name__,
                        delay,
                        attempt + 1,
                        self._retry_policy.max_retries,
                    )
                    time.sleep(delay)
                    delay *= 2
                    continue
                raise mapped from exc

        raise ApiError("Unexpected retry loop termination", details=details)


def _should_retry(exc: BackendError) -> bool:
    if isinstance(exc, (RateLimitError, NetworkError)):
        return True
    if isinstance(exc, ApiError):
        status_code = exc.details.get("status_code")
        return isinstance(status_code, int) and 500 <= status_code <= 599
    return False


def _map_exception(exc: Exception) -> BackendError:
    if isinstance(exc, HttpError):
        return map_http_error(_http_error_to_info(exc), cause=exc)
    if isinstance(exc, (OSError, TimeoutError)):
        return NetworkError("Network error", cause=exc)
    return ApiError("Drive API error", cause=exc)


def _build_parent_query(folder_id: str) -> str:
    return f"'{folder_id}' in parents and trashed=false"


def _parse_size(value: Any) -> Optional[int]:
    if isinstance(value, str) and value.isdigit():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _file_dict_to_entry(data: dict[str, Any]) -> ListingEntry:
    entry_id = data.get("id")
    name = data.get("name")
    mime_type = data.get("mimeType", "")
    if not isinstance(mime_type, str):
        mime_type = ""

    if is_folder(mime_type):
        kind = EntryKind.FOLDER
    elif is_binary_file(mime_type):
        kind = EntryKind.FILE
    else:
        kind = EntryKind.OTHER

    hashes: dict[str, Optional[str]] = {}
    for field_name, key in HASH_FIELDS:
        value = data.get(field_name)
        hashes[key] = value if isinstance(value, str) else None

    url = data.get("webViewLink")
    return ListingEntry(
        entry_id=entry_id if isinstance(entry_id, str) else None,
        kind=kind,
        name=name if isinstance(name, str) else None,
        size=_parse_size(data.get("size")),
        url=url if isinstance(url, str) else None,
        created_time=parse_rfc3339_or_none(data.get("createdTime")),
        modified_time=parse_rfc3339_or_none(data.get("modifiedTime")),
        hashes=hashes,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
