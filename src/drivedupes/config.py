"""Run configuration for drivedupes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from drivedupes.auth import AuthInfo
from drivedupes.backend.base import ROOT_FOLDER_ID
from drivedupes.errors import InvalidArgumentError
from drivedupes.models import HASH_KEYS

ENV_PREFIX: str = "DRIVEDUPES_"

_FALSE_VALUES: tuple[str, ...] = ("0", "false", "no", "off")


@dataclass(slots=True, frozen=True)
class FinderConfig:
    """
    Everything needed for one duplicate-finding run against Google Drive.

    Attributes:
        auth_info: OAuth client secrets and token locations.
        root_folder_ids: Folders to enumerate. Defaults to the drive root.
        shared_drive_id: Enumerate this shared drive instead of My Drive.
        hash_keys: Hash keys applied in order after the size partition.
        trust_child_count: Skip folders the backend reports as empty.
        page_size: Entries requested per listing page (1..1000).
        max_retries: Retries for transient backend failures.
    """

    auth_info: AuthInfo
    root_folder_ids: tuple[str, ...] = (ROOT_FOLDER_ID,)
    shared_drive_id: Optional[str] = None
    hash_keys: tuple[str, ...] = HASH_KEYS
    trust_child_count: bool = True
    page_size: int = 1000
    max_retries: int = 3

    def __post_init__(self) -> None:
        if not isinstance(self.auth_info, AuthInfo):
            raise TypeError("FinderConfig.auth_info must be an AuthInfo")
        if not self.root_folder_ids or not all(
            isinstance(r, str) and r.strip() for r in self.root_folder_ids
        ):
            raise ValueError("FinderConfig.root_folder_ids must contain non-empty strings")
        if not self.hash_keys or not all(isinstance(k, str) and k.strip() for k in self.hash_keys):
            raise ValueError("FinderConfig.hash_keys must contain non-empty strings")
        if not 1 <= self.page_size <= 1000:
            raise ValueError("FinderConfig.page_size must be between 1 and 1000")
        if self.max_retries < 0:
            raise ValueError("FinderConfig.max_retries must be >= 0")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> "FinderConfig":
        """
        Build a config from DRIVEDUPES_* environment variables.

        Keyword overrides win over the environment. `client_secrets_file` and
        `token_file` may be given as overrides instead of an AuthInfo.

        Raises:
            InvalidArgumentError: if a value is missing or malformed.
        """
        env = os.environ if environ is None else environ

        client_secrets = overrides.pop("client_secrets_file", None) or _get(env, "CLIENT_SECRETS")
        token_file = overrides.pop("token_file", None) or _get(env, "TOKEN_FILE")

        values: dict[str, Any] = {}
        if "auth_info" not in overrides:
            if not client_secrets or not token_file:
                raise InvalidArgumentError(
                    "OAuth client secrets and token file paths are required",
                    details={
                        "env": [f"{ENV_PREFIX}CLIENT_SECRETS", f"{ENV_PREFIX}TOKEN_FILE"],
                    },
                )
            values["auth_info"] = AuthInfo(client_secrets_file=client_secrets, token_file=token_file)

        root_ids = _get_list(env, "ROOT_IDS")
        if root_ids:
            values["root_folder_ids"] = root_ids
        hash_keys = _get_list(env, "HASH_KEYS")
        if hash_keys:
            values["hash_keys"] = hash_keys
        shared_drive_id = _get(env, "SHARED_DRIVE_ID")
        if shared_drive_id:
            values["shared_drive_id"] = shared_drive_id
        trust = _get(env, "TRUST_CHILD_COUNT")
        if trust:
            values["trust_child_count"] = trust.lower() not in _FALSE_VALUES
        for name, attr in (("PAGE_SIZE", "page_size"), ("MAX_RETRIES", "max_retries")):
            raw = _get(env, name)
            if raw:
                values[attr] = _to_int(name, raw)

        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**values)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(str(exc), cause=exc) from exc


def _get(env: Mapping[str, str], name: str) -> str:
    return env.get(ENV_PREFIX + name, "").strip()


def _get_list(env: Mapping[str, str], name: str) -> tuple[str, ...]:
    raw = _get(env, name)
    return tuple(s.strip() for s in raw.split(",") if s.strip())


def _to_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"{ENV_PREFIX}{name} must be an integer",
            details={"value": raw},
            cause=exc,
        ) from exc
