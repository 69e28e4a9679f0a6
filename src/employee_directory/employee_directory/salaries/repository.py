from __future__ import annotations

from typing import Protocol, Sequence

from .model import SalaryRecord


class SalaryRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[SalaryRecord]:
        """All salary rows of an employee, newest month first."""

        raise NotImplementedError
