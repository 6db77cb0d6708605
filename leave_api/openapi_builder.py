"""Offline OpenAPI document builder.

Inputs:
- static path/operation docs: YAML blocks in the route module docstrings
- entity schemas: introspected from the SQLAlchemy model registry

Both are read without starting the server. The document is written to disk
by `scripts/generate_spec.py`; the app only serves the resulting file.

This is the canonical builder module; `leave_api/openapi.py` re-exports from here.
"""
import copy
from typing import Any, Dict, Iterable, Optional
from .openapi_parts.constants import DOC_HEADER, DOC_SOURCES, STATIC_SCHEMAS
from .openapi_parts.helpers import collect_paths
from .openapi_parts.introspect import introspect_models

__all__ = ["build_openapi_spec"]


def build_openapi_spec(sources: Optional[Iterable[str]] = None, base=None) -> Dict[str, Any]:
    if base is None:
        from .models.base import load_models
        base = load_models()
    paths = collect_paths(DOC_SOURCES if sources is None else sources)

    schemas: Dict[str, Any] = introspect_models(base)
    for name, schema in STATIC_SCHEMAS.items():
        schemas.setdefault(name, copy.deepcopy(schema))

    spec = copy.deepcopy(DOC_HEADER)
    spec['paths'] = paths
    spec['components'] = {'schemas': schemas}
    return spec
