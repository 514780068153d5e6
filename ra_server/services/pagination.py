from __future__ import annotations

import logging
from typing import Any

from ra_server.core.errors import InvalidRangeError
from ra_server.schemas.resource import PageRequest
from ra_server.services.fields import INT64_MAX

_LOG = logging.getLogger("ra_server.pagination")

SORT_DIRECTIONS = ("ASC", "DESC")


def _window_bound(value: Any) -> int | None:
    if value is None:
        return None
    try:
        bound = value if isinstance(value, int) else int(str(value).strip())
    except ValueError:
        raise InvalidRangeError(f'_start and _end must be integers, got "{value}".')
    if bound > INT64_MAX:
        raise InvalidRangeError(f"_start and _end must not exceed {INT64_MAX}.")
    return bound


def resolve_page(
    start: int | str | None,
    end: int | str | None,
    sort: str | None,
    order: str | None,
    embed: str | None = None,
) -> PageRequest:
    """Turn the ``_start/_end/_sort/_order`` window into a page request."""
    start = _window_bound(start)
    end = _window_bound(end)
    if start is None or end is None or start < 0 or end < 0:
        raise InvalidRangeError(
            "_start and _end parameters are missing or smaller than 0. "
            "These parameters are required for the list operation."
        )
    if end <= start:
        raise InvalidRangeError("_end parameter must be greater than _start parameter.")

    direction = str(order or "").strip().upper()
    if direction not in SORT_DIRECTIONS:
        raise InvalidRangeError(f'_order must be one of ASC or DESC, got "{order}".')
    sort_field = str(sort or "").strip()
    if not sort_field:
        raise InvalidRangeError("_sort parameter is required for the list operation.")

    if embed is not None:
        _LOG.warning("_embed parameter is not supported and will be ignored (_embed=%s)", embed)

    return PageRequest(start=start, end=end, sort_field=sort_field, sort_direction=direction)
