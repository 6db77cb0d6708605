"""Response views of persisted records.

Employee views never include `secret`; everything that leaves the API goes
through one of these.
"""
from __future__ import annotations
from typing import Any, Dict

from leave_api.models.application import Application
from leave_api.models.benefit import Benefit
from leave_api.models.employee import Employee


def benefit_json(b: Benefit) -> Dict[str, Any]:
    return {'id': b.id, 'name': b.name}


def employee_json(e: Employee) -> Dict[str, Any]:
    return {
        'id': e.id,
        'firstName': e.first_name,
        'lastName': e.last_name,
        'date_of_birth': e.date_of_birth.isoformat() if e.date_of_birth else None,
    }


def application_json(a: Application, with_employee: bool = False) -> Dict[str, Any]:
    body = {
        'id': a.id,
        'leave_start_date': a.leave_start_date.isoformat(),
        'leave_end_date': a.leave_end_date.isoformat(),
        'employeeId': a.employee_id,
    }
    if with_employee:
        body['employee'] = employee_json(a.employee)
    return body


__all__ = ['benefit_json', 'employee_json', 'application_json']
