from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ra_server.db.repository import SqlAlchemyRepository
from ra_server.services.fields import FieldSpec, coerce_patch

_LOG = logging.getLogger("ra_server.bulk")


def apply_values(entity: Any, values: Mapping[str, Any]) -> None:
    for attribute, value in values.items():
        setattr(entity, attribute, value)


def update_many(
    repository: SqlAlchemyRepository,
    fields: Mapping[str, FieldSpec],
    ids: Sequence[Any],
    patch: Mapping[str, Any],
) -> list[Any]:
    """Patch every existing entity among ``ids``.

    Returns the requested ids as given, whether or not each one existed.
    The patch is coerced before any entity is touched, so a bad value
    leaves the whole set unchanged.
    """
    if not ids:
        return []
    values = coerce_patch(fields, patch)
    entities = repository.find_all_by_id(ids)
    for entity in entities:
        apply_values(entity, values)
    repository.save_all(entities)
    _LOG.info("updated %d of %d requested %s rows", len(entities), len(ids), repository.model.__tablename__)
    return list(ids)


def delete_many(repository: SqlAlchemyRepository, ids: Sequence[Any]) -> list[Any]:
    """Delete the existing entities among ``ids`` and return only their ids."""
    if not ids:
        return []
    entities = repository.find_all_by_id(ids)
    deleted = [getattr(entity, repository.pk_attribute) for entity in entities]
    repository.delete_all(entities)
    _LOG.info("deleted %d of %d requested %s rows", len(deleted), len(ids), repository.model.__tablename__)
    return deleted
