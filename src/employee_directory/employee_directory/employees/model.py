from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no DB access code). `email` is the external
    identity key and is compared case-insensitively.
    """

    employee_id: int
    name: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.employee_id, "name": self.name, "email": self.email}
