from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note: services depend on this interface, not on a concrete database.
    """

    def get_by_email(self, email: str) -> Optional[Employee]:
        """Case-insensitive exact match."""

        raise NotImplementedError

    def get_or_create(self, *, name: str, email: str) -> Employee:
        """Insert a new employee; if the email already exists, return that row instead."""

        raise NotImplementedError
