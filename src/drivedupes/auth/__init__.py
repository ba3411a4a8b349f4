"""Public auth exports for drivedupes."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import READONLY_SCOPES, OAuthClient

__all__ = ["AuthInfo", "OAuthClient", "READONLY_SCOPES"]
