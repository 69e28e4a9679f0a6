from __future__ import annotations

import logging

from ...core.exceptions import AuthenticationError
from ..model import GoogleIdentity
from .base import RegistrationDecision, RegistrationStrategy

logger = logging.getLogger(__name__)


class StrictRegistrationStrategy(RegistrationStrategy):
    """Only existing employees may log in."""

    def resolve_unregistered(self, identity: GoogleIdentity) -> RegistrationDecision:
        logger.info("Rejecting Google login for unregistered email: %s", identity.email)
        raise AuthenticationError("Email is not registered")
