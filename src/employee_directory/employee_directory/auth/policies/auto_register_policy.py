from __future__ import annotations

import logging

from ...employees.repository import EmployeeRepository
from ..model import GoogleIdentity
from .base import RegistrationDecision, RegistrationStrategy

logger = logging.getLogger(__name__)


class AutoRegisterStrategy(RegistrationStrategy):
    """Create the employee on first verified login."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def resolve_unregistered(self, identity: GoogleIdentity) -> RegistrationDecision:
        name = identity.display_name
        employee = self._employees.get_or_create(name=name, email=str(identity.email))
        logger.info("Auto-registered employee id=%s email=%s", employee.employee_id, employee.email)
        return RegistrationDecision(employee=employee, display_name=employee.name)
