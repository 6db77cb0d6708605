"""Test seeding utilities to reduce duplication."""
from datetime import date, datetime
from typing import Optional
from leave_api.models.application import Application
from leave_api.models.employee import Employee


def create_employee(store, first_name: str, last_name: str, secret: Optional[str] = None) -> Employee:
    """Create an Employee (non-idempotent). Returns the Employee."""
    with store.transaction():
        e = store.create(
            Employee,
            first_name=first_name,
            last_name=last_name,
            date_of_birth=datetime(1990, 1, 1),
            secret=secret or f'{first_name.lower()}-secret',
        )
    return e


def create_application(store, employee_id: int, start: date = date(2024, 11, 1), end: date = date(2024, 11, 10)) -> Application:
    with store.transaction():
        a = store.create(Application, leave_start_date=start, leave_end_date=end, employee_id=employee_id)
    return a


def application_count(store) -> int:
    return store.count(Application)


__all__ = ['create_employee', 'create_application', 'application_count']
