from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SalaryRecord
from .repository import SalaryRepository


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT salary_id, employee_id, month, amount, payment_date
                FROM employee_salaries
                WHERE employee_id=%s
                ORDER BY month DESC
                """,
                (employee_id,),
            )
            rows = fetchall(cur)
            return [
                SalaryRecord(
                    salary_id=int(r["salary_id"]),
                    employee_id=int(r["employee_id"]),
                    month=r["month"],
                    amount=Decimal(r["amount"]),
                    payment_date=r.get("payment_date"),
                )
                for r in rows
            ]
