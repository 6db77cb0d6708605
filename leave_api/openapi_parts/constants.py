"""Centralized constants for the OpenAPI document builder.

Splitting these out keeps `leave_api/openapi_builder.py` concise. Tests depend
on deterministic ordering and content.
"""
import pathlib
from typing import Any, Dict, List

PACKAGE_DIR = pathlib.Path(__file__).resolve().parents[1]

# Route modules whose docstrings carry the static path/operation docs
DOC_SOURCES: List[str] = [
    str(PACKAGE_DIR / 'routes' / 'benefits.py'),
    str(PACKAGE_DIR / 'routes' / 'employees.py'),
    str(PACKAGE_DIR / 'routes' / 'applications.py'),
]

# Marker line separating prose from the YAML block in a docstring
DOC_MARKER = '---'

DOC_HEADER: Dict[str, Any] = {
    'openapi': '3.0.0',
    'info': {
        'title': 'Leave API',
        'description': 'Benefits, employees and leave applications',
        'version': '1.0.0',
        'contact': {'name': 'HR Platform Team'},
    },
    'servers': [{'url': 'http://localhost:5001'}],
}

# SQLAlchemy type class name -> documentation type; anything else is lower-cased
TYPE_MAP: Dict[str, str] = {
    'Integer': 'number',
    'BigInteger': 'number',
    'SmallInteger': 'number',
    'DateTime': 'string',
    'Date': 'string',
}

# Hand-written schemas referenced by the route docs but not backed by a model
STATIC_SCHEMAS: Dict[str, Any] = {
    'ApplicationInput': {
        'type': 'object',
        'properties': {
            'leave_start_date': {'type': 'string', 'format': 'date', 'example': '2024-11-01'},
            'leave_end_date': {'type': 'string', 'format': 'date', 'example': '2024-11-10'},
            'employeeId': {'type': 'integer', 'example': 2},
        },
        'required': ['leave_start_date', 'leave_end_date', 'employeeId'],
    },
    'Pagination': {
        'type': 'object',
        'properties': {
            'total': {'type': 'integer'},
            'page': {'type': 'integer'},
            'pageSize': {'type': 'integer'},
            'totalPages': {'type': 'integer'},
        },
        'required': ['total', 'page', 'pageSize', 'totalPages'],
    },
}

__all__ = [
    "DOC_SOURCES",
    "DOC_MARKER",
    "DOC_HEADER",
    "TYPE_MAP",
    "STATIC_SCHEMAS",
]
