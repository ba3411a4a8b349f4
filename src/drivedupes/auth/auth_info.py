"""OAuth credential locations for drivedupes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Where to find OAuth material for the installed-app flow.

    Attributes:
        client_secrets_file: Path to the OAuth client secrets JSON.
        token_file: Path to the authorized-user token JSON. Created on first
            successful authorization and rewritten after each refresh.
    """

    client_secrets_file: str
    token_file: str

    def __post_init__(self) -> None:
        for name in ("client_secrets_file", "token_file"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{name} must be a non-empty string")
