from __future__ import annotations

import logging
from typing import Optional

import requests

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_TOKENINFO_TIMEOUT, DEFAULT_TOKENINFO_URL
from ..core.exceptions import AuthenticationError, TransportError
from .model import GoogleIdentity

logger = logging.getLogger(__name__)


def _as_bool(value) -> bool:
    # tokeninfo sends "true"/"false" as strings
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


class GoogleTokenValidator:
    """Checks a Google ID token against the tokeninfo introspection endpoint.

    Every call re-verifies: one GET per token, no retries, no caching.
    """

    def __init__(
        self,
        *,
        tokeninfo_url: str = DEFAULT_TOKENINFO_URL,
        timeout: float = DEFAULT_TOKENINFO_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._tokeninfo_url = tokeninfo_url
        self._timeout = timeout
        self._session = session or requests.Session()

    def validate(self, id_token: Optional[str]) -> GoogleIdentity:
        id_token = require_non_empty(id_token, "idToken")

        try:
            resp = self._session.get(self._tokeninfo_url, params={"id_token": id_token}, timeout=self._timeout)
        except requests.RequestException as e:
            logger.exception("Google tokeninfo request failed")
            raise TransportError("Token validation failed") from e

        logger.info("Google tokeninfo status: %s", resp.status_code)
        if resp.status_code != 200:
            logger.warning("Invalid ID token response: %s", resp.text)
            raise AuthenticationError("Invalid ID token")

        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            raise AuthenticationError("Invalid ID token")

        identity = GoogleIdentity(
            email=payload.get("email") or None,
            email_verified=_as_bool(payload.get("email_verified")),
            name=payload.get("name") or None,
        )
        if not identity.email or not identity.email_verified:
            raise AuthenticationError("Unverified or missing email")
        return identity
