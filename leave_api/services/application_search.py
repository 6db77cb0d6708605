"""Search and pagination over leave applications.

Filters (all optional, combined with AND):
  employeeId          exact match
  firstName/lastName  case-insensitive substring on the related employee,
                      grouped into one employee sub-clause

Pagination is 1-based: skip = (page - 1) * limit, take = limit.
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping

from sqlalchemy import and_, false
from sqlalchemy.orm import selectinload

from leave_api.models.application import Application
from leave_api.models.employee import Employee
from leave_api.services.projections import application_json
from leave_api.store import RecordStore
from leave_api.utils.filters import collect_criteria
from leave_api.utils.listing import build_list_payload, parse_pagination
from leave_api.utils.validation import fits_int64


def _contains(column, value: str):
    # literal substring: % and _ in the input are escaped
    return column.icontains(value.lower(), autoescape=True)


def _employee_id_clause(v: int):
    # ids outside the 64-bit column range match nothing
    return Application.employee_id == v if fits_int64(v) else false()


APPLICATION_FILTERS = {
    'employeeId': {'coerce': int, 'op': _employee_id_clause},
}

EMPLOYEE_FILTERS = {
    'firstName': {'coerce': str, 'op': lambda v: _contains(Employee.first_name, v)},
    'lastName': {'coerce': str, 'op': lambda v: _contains(Employee.last_name, v)},
}


def build_search_criteria(params: Mapping[str, Any]) -> List[Any]:
    criteria = collect_criteria(APPLICATION_FILTERS, params)
    employee_criteria = collect_criteria(EMPLOYEE_FILTERS, params)
    if employee_criteria:
        criteria.append(Application.employee.has(and_(*employee_criteria)))
    return criteria


def search_applications(store: RecordStore, params: Mapping[str, Any]) -> Dict[str, Any]:
    criteria = build_search_criteria(params)
    page, limit, skip, take = parse_pagination(params)
    rows = store.find_many(
        Application,
        criteria,
        skip=skip,
        take=take,
        order_by=(Application.id.asc(),),
        options=(selectinload(Application.employee),),
    )
    total = store.count(Application, criteria)
    return build_list_payload([application_json(a, with_employee=True) for a in rows], total, page, limit)


__all__ = ['build_search_criteria', 'search_applications']
