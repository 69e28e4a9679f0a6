from __future__ import annotations

from enum import Enum


class RegistrationPolicy(str, Enum):
    """What happens to a Google-verified email that has no employee row."""

    STRICT = "strict"
    AUTO_REGISTER = "auto-register"
    GUEST = "guest"
