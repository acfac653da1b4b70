"""Shared-secret authentication for ingest routes.

The caller sends the secret in the ``x-api-key`` header; it is compared with
``Settings.api_key``.  The check is fail-closed: a missing header, a wrong
value or an empty configured secret all raise :class:`AuthenticationError`,
which the app turns into a 401.
"""

from __future__ import annotations

import hmac

from fastapi import Depends, Header, Request

from form_ingest.settings import Settings
from form_ingest.utils.dependencies import get_settings
from form_ingest.utils.errors import AuthenticationError
from form_ingest.utils.logger import logger

API_KEY_HEADER = "x-api-key"


def is_valid_api_key(provided: str | None, expected: str) -> bool:
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


async def require_api_key(
    request: Request,
    x_api_key: str | None = Header(None, alias=API_KEY_HEADER),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency that admits the request or raises ``AuthenticationError``."""
    if is_valid_api_key(x_api_key, settings.api_key):
        return

    reason = "missing" if x_api_key is None else "mismatch"
    logger.warning("auth.rejected", extra={"path": request.url.path, "reason": reason})
    raise AuthenticationError(reason)
