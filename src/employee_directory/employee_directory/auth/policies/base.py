from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...employees.model import Employee
from ..model import GoogleIdentity


@dataclass(frozen=True)
class RegistrationDecision:
    """Outcome for a verified email with no employee row.

    `employee` is None when the user continues as a non-persisted guest.
    """

    employee: Optional[Employee]
    display_name: str

    @property
    def registered(self) -> bool:
        return self.employee is not None


class RegistrationStrategy(ABC):
    """Strategy Pattern: encapsulate how unknown verified users are handled."""

    @abstractmethod
    def resolve_unregistered(self, identity: GoogleIdentity) -> RegistrationDecision:
        raise NotImplementedError
