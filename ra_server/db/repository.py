from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from sqlalchemy import asc, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import Session

from ra_server.core.errors import InvalidRangeError, ValidationError
from ra_server.services.fields import FieldSpec

_LOG = logging.getLogger("ra_server.repository")


class SqlAlchemyRepository:
    """Storage capability for one ORM model bound to a request session."""

    def __init__(self, db: Session, model: type, fields: Mapping[str, FieldSpec]):
        self.db = db
        self.model = model
        self.fields = fields
        pk = sa_inspect(model).primary_key
        if len(pk) != 1:
            raise TypeError(f"{model.__name__} must have exactly one primary key column")
        self.pk_attribute = pk[0].key

    @property
    def _pk(self):
        return getattr(self.model, self.pk_attribute)

    def _sort_column(self, sort_field: str):
        spec = self.fields.get(sort_field)
        col = getattr(self.model, spec.attribute, None) if spec is not None else None
        if col is None:
            raise InvalidRangeError(f'Unknown sort field "{sort_field}"')
        return spec.attribute, col

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            _LOG.info("integrity error on %s: %s", self.model.__tablename__, exc.orig)
            raise ValidationError("Data constraint violated")

    def query(
        self,
        predicate,
        page_index: int,
        page_size: int,
        sort_field: str,
        sort_direction: str,
    ) -> tuple[list[Any], int]:
        attribute, col = self._sort_column(sort_field)
        base = self.db.query(self.model).filter(predicate)
        total = base.count()
        ordering = [asc(col) if sort_direction == "ASC" else desc(col)]
        if attribute != self.pk_attribute:
            ordering.append(asc(self._pk))
        rows = base.order_by(*ordering).offset(page_index * page_size).limit(page_size).all()
        return rows, total

    def find_by_id(self, entity_id: Any):
        return self.db.get(self.model, entity_id)

    def find_all_by_id(self, ids: Iterable[Any]) -> list[Any]:
        ids = list(ids)
        if not ids:
            return []
        return self.db.query(self.model).filter(self._pk.in_(ids)).order_by(asc(self._pk)).all()

    def exists_by_id(self, entity_id: Any) -> bool:
        return self.db.query(self._pk).filter(self._pk == entity_id).first() is not None

    def save(self, entity: Any):
        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def save_all(self, entities: Sequence[Any]) -> None:
        self.db.add_all(entities)
        self._commit()

    def delete_by_id(self, entity_id: Any) -> None:
        entity = self.find_by_id(entity_id)
        if entity is None:
            return
        self.db.delete(entity)
        self._commit()

    def delete_all(self, entities: Sequence[Any]) -> None:
        for entity in entities:
            self.db.delete(entity)
        self._commit()
