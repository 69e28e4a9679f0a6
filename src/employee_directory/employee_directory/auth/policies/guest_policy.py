from __future__ import annotations

import logging

from ..model import GoogleIdentity
from .base import RegistrationDecision, RegistrationStrategy

logger = logging.getLogger(__name__)


class GuestStrategy(RegistrationStrategy):
    """Let the user in as a guest; nothing is written to the store."""

    def resolve_unregistered(self, identity: GoogleIdentity) -> RegistrationDecision:
        logger.info("Google-authenticated email not found in employees table: %s", identity.email)
        return RegistrationDecision(employee=None, display_name=identity.display_name)
