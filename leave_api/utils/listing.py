from __future__ import annotations
from typing import Mapping, Tuple
from leave_api.config.pagination import normalize_pagination, page_window, total_pages
from leave_api.errors import ValidationError
from leave_api.utils.filters import INVALID_QUERY

def parse_pagination(args: Mapping[str, str]) -> Tuple[int, int, int, int]:
    """Return (page, limit, skip, take) from query args."""
    try:
        page, limit = normalize_pagination(args.get('page'), args.get('limit'))
    except ValueError:
        raise ValidationError(INVALID_QUERY)
    skip, take = page_window(page, limit)
    return page, limit, skip, take

def build_list_payload(rows: list, total: int, page: int, limit: int):
    return {
        'data': rows,
        'pagination': {
            'total': total,
            'page': page,
            'pageSize': len(rows),
            'totalPages': total_pages(total, limit),
        }
    }
