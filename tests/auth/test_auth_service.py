from __future__ import annotations

from typing import Optional

import pytest

from src.employee_directory.employee_directory.auth.factory import RegistrationStrategyFactory
from src.employee_directory.employee_directory.auth.model import GoogleIdentity
from src.employee_directory.employee_directory.auth.policies.auto_register_policy import AutoRegisterStrategy
from src.employee_directory.employee_directory.auth.policies.guest_policy import GuestStrategy
from src.employee_directory.employee_directory.auth.policies.strict_policy import StrictRegistrationStrategy
from src.employee_directory.employee_directory.auth.service import AuthService
from src.employee_directory.employee_directory.common.datetime_utils import epoch_millis
from src.employee_directory.employee_directory.core.enums import RegistrationPolicy
from src.employee_directory.employee_directory.core.exceptions import AuthenticationError, ValidationError
from src.employee_directory.employee_directory.employees.model import Employee


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[int, Employee] = {e.employee_id: e for e in employees}
        self.created: list[Employee] = []

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.email.lower() == email.lower()), None)

    def get_or_create(self, *, name: str, email: str) -> Employee:
        existing = self.get_by_email(email)
        if existing:
            return existing
        emp = Employee(employee_id=max(self._by_id, default=0) + 1, name=name, email=email)
        self._by_id[emp.employee_id] = emp
        self.created.append(emp)
        return emp


class FakeValidator:
    def __init__(self, identity: Optional[GoogleIdentity] = None, error: Optional[Exception] = None):
        self._identity = identity
        self._error = error
        self.tokens: list[str] = []

    def validate(self, id_token):
        self.tokens.append(id_token)
        if self._error is not None:
            raise self._error
        return self._identity


ALICE = Employee(employee_id=1, name="Alice Johnson", email="alice@example.com")


def _auth(employees, identity, policy, now):
    registration = RegistrationStrategyFactory(employees).for_policy(policy)
    return AuthService(employees, FakeValidator(identity), registration, clock=lambda: now)


@pytest.mark.parametrize("policy", list(RegistrationPolicy))
def test_existing_employee_is_registered_under_every_policy(policy, fixed_now):
    employees = InMemoryEmployees([ALICE])
    identity = GoogleIdentity(email="Alice@Example.com", email_verified=True, name="Alice J")

    result = _auth(employees, identity, policy, fixed_now).login_with_google("tok")

    assert result.registered is True
    assert result.user == {"id": 1, "name": "Alice Johnson", "email": "alice@example.com"}
    assert result.token == f"demo-token-1-{epoch_millis(fixed_now)}"
    assert employees.created == []


def test_blank_token_is_malformed_and_skips_validator(fixed_now):
    validator = FakeValidator(GoogleIdentity(email="alice@example.com", email_verified=True))
    svc = AuthService(InMemoryEmployees([ALICE]), validator, GuestStrategy(), clock=lambda: fixed_now)

    with pytest.raises(ValidationError):
        svc.login_with_google("  ")
    assert validator.tokens == []


def test_validator_failures_propagate(fixed_now):
    validator = FakeValidator(error=AuthenticationError("Invalid ID token"))
    svc = AuthService(InMemoryEmployees([ALICE]), validator, GuestStrategy(), clock=lambda: fixed_now)

    with pytest.raises(AuthenticationError):
        svc.login_with_google("tok")


def test_strict_policy_rejects_unregistered_email(fixed_now):
    employees = InMemoryEmployees([ALICE])
    identity = GoogleIdentity(email="new@example.com", email_verified=True, name="New Person")

    with pytest.raises(AuthenticationError, match="not registered"):
        _auth(employees, identity, "strict", fixed_now).login_with_google("tok")
    assert employees.created == []


def test_auto_register_creates_exactly_one_employee(fixed_now):
    employees = InMemoryEmployees([ALICE])
    identity = GoogleIdentity(email="new@example.com", email_verified=True, name="New Person")
    svc = _auth(employees, identity, "auto-register", fixed_now)

    first = svc.login_with_google("tok")
    second = svc.login_with_google("tok")

    assert first.registered is True
    assert first.user == {"id": 2, "name": "New Person", "email": "new@example.com"}
    assert first.token == f"demo-token-2-{epoch_millis(fixed_now)}"
    assert second.user["id"] == 2
    assert len(employees.created) == 1


def test_auto_register_falls_back_to_email_local_part(fixed_now):
    employees = InMemoryEmployees()
    identity = GoogleIdentity(email="jane.doe@example.com", email_verified=True, name=None)

    result = _auth(employees, identity, RegistrationPolicy.AUTO_REGISTER, fixed_now).login_with_google("tok")

    assert result.user["name"] == "jane.doe"


def test_guest_policy_returns_unregistered_without_persisting(fixed_now):
    employees = InMemoryEmployees([ALICE])
    identity = GoogleIdentity(email="visitor@example.com", email_verified=True, name="")

    result = _auth(employees, identity, "guest", fixed_now).login_with_google("tok")

    assert result.registered is False
    assert result.user == {"name": "visitor", "email": "visitor@example.com"}
    assert "id" not in result.user
    assert result.token == f"demo-token-guest-{epoch_millis(fixed_now)}"
    assert employees.get_by_email("visitor@example.com") is None


def test_custom_token_prefix(fixed_now):
    svc = AuthService(
        InMemoryEmployees([ALICE]),
        FakeValidator(GoogleIdentity(email="alice@example.com", email_verified=True)),
        GuestStrategy(),
        token_prefix="pay",
        clock=lambda: fixed_now,
    )

    assert svc.login_with_google("tok").token.startswith("pay-1-")


def test_factory_maps_policy_names_to_strategies():
    factory = RegistrationStrategyFactory(InMemoryEmployees())

    assert isinstance(factory.for_policy("strict"), StrictRegistrationStrategy)
    assert isinstance(factory.for_policy("auto-register"), AutoRegisterStrategy)
    assert isinstance(factory.for_policy(RegistrationPolicy.GUEST), GuestStrategy)


def test_factory_rejects_unknown_policy():
    with pytest.raises(ValueError, match="Unknown registration policy"):
        RegistrationStrategyFactory(InMemoryEmployees()).for_policy("merge-everything")


def test_registration_decisions_report_registered_flag():
    identity = GoogleIdentity(email="new@example.com", email_verified=True, name="New Person")

    guest = GuestStrategy().resolve_unregistered(identity)
    created = AutoRegisterStrategy(InMemoryEmployees()).resolve_unregistered(identity)

    assert guest.registered is False
    assert guest.employee is None
    assert created.registered is True
    assert created.employee.email == "new@example.com"
