from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.factory import RegistrationStrategyFactory
from .auth.google_validator import GoogleTokenValidator
from .auth.service import AuthService
from .core.constants import DEFAULT_TOKEN_PREFIX, DEFAULT_TOKENINFO_TIMEOUT, DEFAULT_TOKENINFO_URL
from .core.enums import RegistrationPolicy
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeDirectoryService
from .salaries.mysql_salary_repository import MySQLSalaryRepository
from .salaries.repository import SalaryRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    salaries_repo: SalaryRepository

    directory_service: EmployeeDirectoryService
    auth_service: AuthService


def assemble(
    *,
    employees_repo: EmployeeRepository,
    salaries_repo: SalaryRepository,
    validator: GoogleTokenValidator,
    registration_policy: RegistrationPolicy | str = RegistrationPolicy.GUEST,
    token_prefix: str = DEFAULT_TOKEN_PREFIX,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    registration = RegistrationStrategyFactory(employees_repo).for_policy(registration_policy)

    directory_service = EmployeeDirectoryService(employees_repo, salaries_repo)
    auth_service = AuthService(employees_repo, validator, registration, token_prefix=token_prefix)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        salaries_repo=salaries_repo,
        directory_service=directory_service,
        auth_service=auth_service,
    )


def build_container(
    *,
    db_config: dict,
    registration_policy: RegistrationPolicy | str = RegistrationPolicy.GUEST,
    tokeninfo_url: str = DEFAULT_TOKENINFO_URL,
    tokeninfo_timeout: float = DEFAULT_TOKENINFO_TIMEOUT,
    token_prefix: str = DEFAULT_TOKEN_PREFIX,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        employees_repo=MySQLEmployeeRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
        validator=GoogleTokenValidator(tokeninfo_url=tokeninfo_url, timeout=tokeninfo_timeout),
        registration_policy=registration_policy,
        token_prefix=token_prefix,
        conn=conn,
    )
