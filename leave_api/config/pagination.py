import math

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# keeps (page - 1) * limit within a 64-bit OFFSET
MAX_PAGE = (2 ** 63 - 1) // MAX_LIMIT

def normalize_pagination(page_raw, limit_raw):
    try:
        page = int(page_raw) if page_raw not in (None, '') else DEFAULT_PAGE
        limit = int(limit_raw) if limit_raw not in (None, '') else DEFAULT_LIMIT
    except (TypeError, ValueError):
        raise ValueError('page/limit must be int')
    if page > MAX_PAGE:
        raise ValueError('page out of range')
    page = max(1, page)
    limit = max(1, min(limit, MAX_LIMIT))
    return page, limit

def page_window(page: int, limit: int):
    """Return (skip, take) for a 1-based page."""
    return (page - 1) * limit, limit

def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0
