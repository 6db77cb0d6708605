from __future__ import annotations
from typing import Any, Dict, List, Mapping
from leave_api.errors import ValidationError

INVALID_QUERY = 'Invalid query parameters.'

def collect_criteria(specs: Dict[str, Dict[str, Any]], params: Mapping[str, Any]) -> List[Any]:
    """Generic filter builder.

    specs: { param_name: { 'op': callable(value)->clause, 'coerce': type/func (optional) } }
    Params that are absent, empty or falsy after coercion (employeeId=0) are
    skipped; a failed coercion is a 400.
    """
    criteria = []
    for name, meta in specs.items():
        val = params.get(name)
        if val is None or val == '':
            continue
        if 'coerce' in meta:
            try:
                val = meta['coerce'](val)
            except (TypeError, ValueError):
                raise ValidationError(INVALID_QUERY)
        if not val:
            continue
        criteria.append(meta['op'](val))
    return criteria
