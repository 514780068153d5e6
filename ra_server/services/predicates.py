from __future__ import annotations

import logging
from typing import Iterable, Mapping

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from ra_server.services.fields import FieldSpec, coerce_value

_LOG = logging.getLogger("ra_server.predicates")

LIKE_ESCAPE = "\\"


def _escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _search_predicate(model, fields: Mapping[str, FieldSpec], term: str, search_fields: Iterable[str]):
    pattern = f"%{_escape_like(term)}%"
    clauses = []
    for name in search_fields:
        spec = fields[name]
        col = getattr(model, spec.attribute)
        clauses.append(col.ilike(pattern, escape=LIKE_ESCAPE))
    if not clauses:
        return None
    return or_(*clauses)


def build_predicate(
    model,
    fields: Mapping[str, FieldSpec],
    filters: Mapping[str, str],
    term: str | None = None,
    search_fields: Iterable[str] = (),
) -> ColumnElement[bool]:
    """AND together the free-text OR-group and one equality per filter.

    Filter keys that are not fields of the resource are ignored. Empty values
    add no restriction. With nothing to restrict, the result matches every row.
    """
    clauses = []
    if term:
        search = _search_predicate(model, fields, term, search_fields)
        if search is not None:
            clauses.append(search)
    for key, raw_value in filters.items():
        if raw_value is None or raw_value == "":
            continue
        spec = fields.get(key)
        if spec is None:
            _LOG.debug("ignoring unknown filter field %r", key)
            continue
        col = getattr(model, spec.attribute)
        if spec.python_type is str:
            clauses.append(col == raw_value)
        else:
            clauses.append(col == coerce_value(key, spec, raw_value))
    if not clauses:
        return true()
    return and_(*clauses)
