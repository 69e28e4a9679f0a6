from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SalaryRecord:
    """Domain entity: one monthly salary payment (immutable once stored)."""

    salary_id: int
    employee_id: int
    month: str
    amount: Decimal
    payment_date: Optional[date] = None


@dataclass(frozen=True)
class SalaryEntry:
    """Read-model for the salary history endpoint."""

    month: str
    amount: Decimal
    paid_on: str

    def to_dict(self) -> dict:
        return {"month": self.month, "amount": float(self.amount), "paidOn": self.paid_on}
