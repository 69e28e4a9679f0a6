from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class GoogleIdentity:
    """Claims returned by the tokeninfo endpoint that we care about."""

    email: Optional[str]
    email_verified: bool
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Token display name, or the local part of the email when it has none."""
        if self.name and self.name.strip():
            return self.name.strip()
        return (self.email or "").split("@")[0]


@dataclass(frozen=True)
class AuthResult:
    user: dict[str, Any] = field(default_factory=dict)
    token: str = ""
    registered: bool = False

    def to_dict(self) -> dict:
        return {"user": dict(self.user), "token": self.token, "registered": self.registered}
