from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import epoch_millis, now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_TOKEN_PREFIX, GUEST_TOKEN_MARKER
from ..employees.repository import EmployeeRepository
from .google_validator import GoogleTokenValidator
from .model import AuthResult
from .policies.base import RegistrationStrategy

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: login with Google.

    Validate the ID token, match the verified email against the employee
    store and let the configured registration strategy decide about unknown
    emails. The returned token is an opaque demo string, not a credential.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        validator: GoogleTokenValidator,
        registration: RegistrationStrategy,
        *,
        token_prefix: str = DEFAULT_TOKEN_PREFIX,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._validator = validator
        self._registration = registration
        self._token_prefix = token_prefix
        self._clock = clock

    def issue_demo_token(self, employee_id: Optional[int]) -> str:
        subject = str(employee_id) if employee_id is not None else GUEST_TOKEN_MARKER
        return f"{self._token_prefix}-{subject}-{epoch_millis(self._clock())}"

    def login_with_google(self, id_token: Optional[str]) -> AuthResult:
        id_token = require_non_empty(id_token, "idToken")
        identity = self._validator.validate(id_token)

        employee = self._employees.get_by_email(str(identity.email))
        if employee is None:
            decision = self._registration.resolve_unregistered(identity)
            if not decision.registered:
                user = {"name": decision.display_name, "email": identity.email}
                return AuthResult(user=user, token=self.issue_demo_token(None), registered=False)
            employee = decision.employee

        return AuthResult(user=employee.to_dict(), token=self.issue_demo_token(employee.employee_id), registered=True)
