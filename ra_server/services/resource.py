"""Generic resource service shared by every exposed collection.

A concrete resource subclasses :class:`ResourceService` and declares its ORM
model, DTO classes and field descriptors; the behaviour comes from the query
library in this package.
"""
from __future__ import annotations

from typing import Any, ClassVar, Generic, Iterable, Mapping, MutableMapping, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from ra_server.core.errors import NotFoundError
from ra_server.db.repository import SqlAlchemyRepository
from ra_server.schemas.resource import PageRequest, PageResult, ReferenceQuery
from ra_server.services.bulk import apply_values, delete_many, update_many
from ra_server.services.fields import FieldSpec, coerce_patch, coerce_value
from ra_server.services.predicates import build_predicate
from ra_server.services.query_params import normalize_filters
from ra_server.services.reference import scope_to_reference

ReadT = TypeVar("ReadT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
IdT = TypeVar("IdT")


class ResourceService(Generic[ReadT, CreateT, IdT]):
    name: ClassVar[str]
    model: ClassVar[type]
    read_schema: ClassVar[type[BaseModel]]
    create_schema: ClassVar[type[BaseModel]]
    fields: ClassVar[Mapping[str, FieldSpec]]
    search_fields: ClassVar[tuple[str, ...]] = ()
    id_field: ClassVar[str] = "id"

    def __init__(self, db: Session):
        self.db = db
        self.repository = SqlAlchemyRepository(db, self.model, self.fields)

    def to_dto(self, entity: Any) -> ReadT:
        return self.read_schema.model_validate(entity)

    def parse_id(self, raw: Any) -> IdT:
        return coerce_value(self.id_field, self.fields[self.id_field], raw)

    def parse_ids(self, raws: Iterable[Any]) -> list[IdT]:
        ids: list[IdT] = []
        for raw in raws:
            entity_id = self.parse_id(raw)
            if entity_id not in ids:
                ids.append(entity_id)
        return ids

    def _not_found(self, entity_id: Any) -> NotFoundError:
        return NotFoundError(f"{self.model.__name__} not found with id: {entity_id}")

    def _page(self, page: PageRequest, term: str | None, filters: Mapping[str, str]) -> PageResult:
        predicate = build_predicate(self.model, self.fields, filters, term, self.search_fields)
        rows, total = self.repository.query(
            predicate, page.page_index, page.page_size, page.sort_field, page.sort_direction
        )
        return PageResult(items=[self.to_dto(row) for row in rows], total=total)

    def get_list(self, page: PageRequest, params: MutableMapping[str, str]) -> PageResult:
        term, filters = normalize_filters(params)
        return self._page(page, term, filters)

    def get_many(self, raw_ids: Iterable[Any]) -> list[ReadT]:
        return [self.to_dto(row) for row in self.repository.find_all_by_id(self.parse_ids(raw_ids))]

    def get_many_by_reference(
        self, reference: ReferenceQuery, page: PageRequest, params: MutableMapping[str, str]
    ) -> PageResult:
        term, filters = normalize_filters(params)
        scope_to_reference(filters, reference, self.fields)
        return self._page(page, term, filters)

    def get_one(self, raw_id: Any) -> ReadT:
        entity_id = self.parse_id(raw_id)
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise self._not_found(entity_id)
        return self.to_dto(entity)

    def create(self, data: CreateT) -> ReadT:
        entity = self.model(**data.model_dump())
        return self.to_dto(self.repository.save(entity))

    def update(self, raw_id: Any, patch: Mapping[str, Any]) -> ReadT:
        entity_id = self.parse_id(raw_id)
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise self._not_found(entity_id)
        apply_values(entity, coerce_patch(self.fields, patch))
        return self.to_dto(self.repository.save(entity))

    def update_many(self, raw_ids: Iterable[Any], patch: Mapping[str, Any]) -> list[IdT]:
        return update_many(self.repository, self.fields, self.parse_ids(raw_ids), patch)

    def delete(self, raw_id: Any) -> None:
        entity_id = self.parse_id(raw_id)
        if not self.repository.exists_by_id(entity_id):
            raise self._not_found(entity_id)
        self.repository.delete_by_id(entity_id)

    def delete_many(self, raw_ids: Iterable[Any]) -> list[IdT]:
        return delete_many(self.repository, self.parse_ids(raw_ids))
