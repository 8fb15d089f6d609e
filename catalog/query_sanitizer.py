"""
Query Sanitization — shared by the product search endpoints.

Strips markup and control characters, enforces length limits and
normalises whitespace before a query reaches the intent extractor.
"""

import re
import html


# ── Limits ────────────────────────────────────────────────
MAX_QUERY_LENGTH = 200
MIN_QUERY_LENGTH = 2
DEFAULT_PAGE_SIZE = 24
MAX_PAGE_SIZE = 100


def sanitize_query(raw) -> str:
    """
    Sanitise a user search query.

    1. HTML-unescape (``&amp;`` etc. from the frontend)
    2. Remove HTML tags
    3. Remove control characters and null bytes
    4. Collapse whitespace
    5. Truncate to MAX_QUERY_LENGTH
    """
    if not raw or not isinstance(raw, str):
        return ""

    q = html.unescape(raw.strip())
    q = re.sub(r"<[^>]+>", "", q)
    q = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", q)
    q = re.sub(r"\s+", " ", q).strip()

    return q[:MAX_QUERY_LENGTH]


def validate_query(query: str) -> str | None:
    """
    Validate a sanitised query. Returns an error string or None if valid.
    """
    if not query:
        return "Missing required parameter 'q' (search query)"

    if len(query) < MIN_QUERY_LENGTH:
        return f"Query must be at least {MIN_QUERY_LENGTH} characters long"

    if not re.search(r"[a-zA-Z0-9]", query):
        return "Query must contain at least one letter or number"

    return None


def get_pagination_params(request) -> tuple[int, int]:
    """
    Extract and clamp page/limit from query params.

    Supports:
        ?page=2&limit=24    (page-based)
        ?offset=48&limit=24 (offset-based, takes priority over page)

    Returns (offset, limit).
    """
    try:
        limit = int(request.query_params.get("limit", DEFAULT_PAGE_SIZE))
    except (ValueError, TypeError):
        limit = DEFAULT_PAGE_SIZE
    limit = max(1, min(limit, MAX_PAGE_SIZE))

    offset_raw = request.query_params.get("offset")
    if offset_raw is not None:
        try:
            offset = max(0, int(offset_raw))
        except (ValueError, TypeError):
            offset = 0
    else:
        try:
            page = max(1, int(request.query_params.get("page", 1)))
        except (ValueError, TypeError):
            page = 1
        offset = (page - 1) * limit

    return offset, limit


def page_meta(total: int, offset: int, limit: int) -> dict:
    """Pagination block for list responses."""
    return {
        "total": total,
        "page": (offset // limit) + 1,
        "limit": limit,
        "has_more": (offset + limit) < total,
        "total_pages": max(1, -(-total // limit)),  # ceil division
    }
