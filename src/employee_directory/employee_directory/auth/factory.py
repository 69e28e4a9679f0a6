from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import RegistrationPolicy
from ..employees.repository import EmployeeRepository
from .policies.auto_register_policy import AutoRegisterStrategy
from .policies.base import RegistrationStrategy
from .policies.guest_policy import GuestStrategy
from .policies.strict_policy import StrictRegistrationStrategy


@dataclass
class RegistrationStrategyFactory:
    """Factory Pattern: pick the registration strategy named in settings."""

    employees: EmployeeRepository

    def for_policy(self, policy: RegistrationPolicy | str) -> RegistrationStrategy:
        try:
            policy = RegistrationPolicy(policy)
        except ValueError:
            allowed = ", ".join(p.value for p in RegistrationPolicy)
            raise ValueError(f"Unknown registration policy {policy!r} (expected one of: {allowed})")

        if policy == RegistrationPolicy.STRICT:
            return StrictRegistrationStrategy()
        if policy == RegistrationPolicy.AUTO_REGISTER:
            return AutoRegisterStrategy(self.employees)
        return GuestStrategy()
