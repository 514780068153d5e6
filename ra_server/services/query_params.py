from __future__ import annotations

from typing import MutableMapping

# Protocol keys owned by the list endpoint itself; never entity filters.
RESERVED_PARAMS = frozenset({"_start", "_end", "_sort", "_order", "_embed", "id"})
SEARCH_PARAM = "q"


def normalize_filters(params: MutableMapping[str, str]) -> tuple[str | None, MutableMapping[str, str]]:
    """Consume reserved keys and the free-text term from ``params``.

    Returns ``(term, params)``; ``term`` is ``None`` when ``q`` is missing or empty.
    """
    for key in RESERVED_PARAMS:
        params.pop(key, None)
    term = params.pop(SEARCH_PARAM, None)
    return (term or None), params
