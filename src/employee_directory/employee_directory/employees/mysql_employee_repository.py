from __future__ import annotations

import logging
from typing import Optional

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _to_employee(row: dict) -> Employee:
    return Employee(employee_id=int(row["employee_id"]), name=row["name"], email=row["email"])


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, name, email FROM employees WHERE LOWER(email)=LOWER(%s)",
                (email,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_or_create(self, *, name: str, email: str) -> Employee:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("INSERT INTO employees(name, email) VALUES(%s,%s)", (name, email))
                return Employee(employee_id=int(cur.lastrowid), name=name, email=email)
        except IntegrityError as e:
            if e.errno != errorcode.ER_DUP_ENTRY:
                raise
            # Lost a race with another login for the same email.
            logger.info("Employee with email %s already exists, re-reading", email)
            existing = self.get_by_email(email)
            if existing is None:
                raise
            return existing
