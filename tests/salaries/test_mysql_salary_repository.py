from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.employee_directory.employee_directory.salaries.model import SalaryRecord
from src.employee_directory.employee_directory.salaries.mysql_salary_repository import MySQLSalaryRepository


class FakeCursor:
    def __init__(self, db: "FakeConnectionFactory"):
        self._db = db

    def execute(self, sql, params=()):
        self._db.executed.append((" ".join(sql.split()), params))

    def fetchall(self):
        return list(self._db.rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db: "FakeConnectionFactory"):
        self._db = db

    def cursor(self, dictionary=False):
        return FakeCursor(self._db)

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, rows=()):
        self.rows = list(rows)
        self.executed: list[tuple[str, tuple]] = []

    def connect(self):
        return FakeConnection(self)


def test_list_for_employee_orders_by_month_desc():
    db = FakeConnectionFactory()
    repo = MySQLSalaryRepository(db)

    assert repo.list_for_employee(3) == []
    sql, params = db.executed[0]
    assert "WHERE employee_id=%s" in sql
    assert sql.endswith("ORDER BY month DESC")
    assert params == (3,)


def test_list_for_employee_maps_rows():
    db = FakeConnectionFactory(
        rows=[
            {"salary_id": 1, "employee_id": 2, "month": "2025-11", "amount": "4500.00", "payment_date": date(2025, 11, 25)},
            {"salary_id": 3, "employee_id": 2, "month": "2025-09", "amount": Decimal("4400.00"), "payment_date": None},
        ]
    )

    records = MySQLSalaryRepository(db).list_for_employee(2)

    assert records == [
        SalaryRecord(salary_id=1, employee_id=2, month="2025-11", amount=Decimal("4500.00"), payment_date=date(2025, 11, 25)),
        SalaryRecord(salary_id=3, employee_id=2, month="2025-09", amount=Decimal("4400.00"), payment_date=None),
    ]
    assert isinstance(records[0].amount, Decimal)
