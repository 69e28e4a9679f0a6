from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import default_payment_date, format_iso_date
from ..salaries.model import SalaryEntry
from ..salaries.repository import SalaryRepository
from .model import Employee
from .repository import EmployeeRepository


class EmployeeDirectoryService:
    """Use case: look up employees and their salary history (read-only).

    Absence is never an error here: unknown emails give None and unknown
    employee ids give an empty history.
    """

    def __init__(self, employees: EmployeeRepository, salaries: SalaryRepository):
        self._employees = employees
        self._salaries = salaries

    def find_employee_by_email(self, email: Optional[str]) -> Optional[Employee]:
        if not email or not email.strip():
            return None
        return self._employees.get_by_email(email.strip())

    def get_salary_history(self, employee_id: int) -> list[SalaryEntry]:
        records = self._salaries.list_for_employee(int(employee_id))

        out: list[SalaryEntry] = []
        for r in records:
            paid_on = format_iso_date(r.payment_date) if r.payment_date else default_payment_date(r.month)
            out.append(SalaryEntry(month=r.month, amount=r.amount, paid_on=paid_on))

        # YYYY-MM sorts lexically; don't rely on the store for ordering.
        out.sort(key=lambda e: e.month, reverse=True)
        return out
