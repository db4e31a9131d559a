"""Page/limit normalisation and pagination metadata."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from ..schemas.common import PaginationMeta

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(slots=True, frozen=True)
class PageParams:
    """Normalised pagination window."""

    page: int
    limit: int
    skip: int


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(value: object, default: int) -> int:
    """Read the leading integer of ``value`` (``"10abc"`` is 10, ``"1.5"`` is 1)."""
    if value is None or isinstance(value, bool):
        return default
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else default


def normalize_pagination(page: object = None, limit: object = None) -> PageParams:
    """Convert raw ``page``/``limit`` inputs into a bounded offset window."""

    parsed_page = _parse_int(page, DEFAULT_PAGE) or DEFAULT_PAGE
    parsed_limit = _parse_int(limit, DEFAULT_LIMIT) or DEFAULT_LIMIT
    normalized_page = max(parsed_page, 1)
    normalized_limit = min(max(parsed_limit, 1), MAX_LIMIT)
    return PageParams(
        page=normalized_page,
        limit=normalized_limit,
        skip=(normalized_page - 1) * normalized_limit,
    )


def total_pages(total_count: int, limit: int) -> int:
    """Return the number of pages needed for ``total_count`` items (at least one)."""

    return max(math.ceil(total_count / limit), 1)


def build_pagination_meta(total_count: int, page: int, limit: int) -> PaginationMeta:
    """Return the metadata block attached to paginated list responses."""

    return PaginationMeta(
        total_count=total_count,
        page=page,
        limit=limit,
        total_pages=total_pages(total_count, limit),
    )


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "PageParams",
    "build_pagination_meta",
    "normalize_pagination",
    "total_pages",
]
