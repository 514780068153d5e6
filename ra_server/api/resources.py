import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from ra_server.db.session import get_db
from ra_server.schemas.resource import PageResult, ReferenceQuery
from ra_server.services.pagination import resolve_page
from ra_server.services.resource import ResourceService

_LOG = logging.getLogger("ra_server.resources")

TOTAL_COUNT_HEADER = "X-Total-Count"


def _with_total(response: Response, result: PageResult) -> list[Any]:
    response.headers[TOTAL_COUNT_HEADER] = str(result.total)
    response.headers["Access-Control-Expose-Headers"] = TOTAL_COUNT_HEADER
    return result.items


def build_resource_router(service_cls: type[ResourceService]) -> APIRouter:
    """Mount the uniform list/get/create/update/delete contract for one resource."""
    router = APIRouter()
    name = service_cls.name
    read_schema = service_cls.read_schema
    create_schema = service_cls.create_schema

    def get_service(db: Session = Depends(get_db)) -> ResourceService:
        return service_cls(db)

    @router.get("", response_model=list[read_schema], summary=f"List {name}")
    def get_list(
        request: Request,
        response: Response,
        start: str | None = Query(None, alias="_start"),
        end: str | None = Query(None, alias="_end"),
        sort: str | None = Query(None, alias="_sort"),
        order: str | None = Query(None, alias="_order"),
        embed: str | None = Query(None, alias="_embed"),
        ids: list[str] | None = Query(None, alias="id"),
        service: ResourceService = Depends(get_service),
    ):
        if ids:
            _LOG.info("get_many %s ids=%s", name, ids)
            return service.get_many(ids)
        params = dict(request.query_params)
        _LOG.info("get_list %s params=%s", name, params)
        page = resolve_page(start, end, sort, order, embed)
        return _with_total(response, service.get_list(page, params))

    @router.get("/of/{target_field}/{target_id}", response_model=list[read_schema], summary=f"List {name} by reference")
    def get_many_by_reference(
        target_field: str,
        target_id: str,
        request: Request,
        response: Response,
        start: str | None = Query(None, alias="_start"),
        end: str | None = Query(None, alias="_end"),
        sort: str | None = Query(None, alias="_sort"),
        order: str | None = Query(None, alias="_order"),
        embed: str | None = Query(None, alias="_embed"),
        service: ResourceService = Depends(get_service),
    ):
        params = dict(request.query_params)
        _LOG.info("get_many_by_reference %s %s=%s params=%s", name, target_field, target_id, params)
        page = resolve_page(start, end, sort, order, embed)
        reference = ReferenceQuery(target_field=target_field, target_id=target_id)
        return _with_total(response, service.get_many_by_reference(reference, page, params))

    @router.get("/{row_id}", response_model=read_schema, summary=f"Get one of {name}")
    def get_one(row_id: str, service: ResourceService = Depends(get_service)):
        _LOG.info("get_one %s id=%s", name, row_id)
        return service.get_one(row_id)

    @router.post("", response_model=read_schema, status_code=201, summary=f"Create one of {name}")
    def create(payload: create_schema, service: ResourceService = Depends(get_service)):
        _LOG.info("create %s data=%s", name, payload)
        return service.create(payload)

    @router.put("/{row_id}", response_model=read_schema, summary=f"Update one of {name}")
    def update(
        row_id: str,
        payload: dict[str, Any] = Body(...),
        service: ResourceService = Depends(get_service),
    ):
        _LOG.info("update %s id=%s fields=%s", name, row_id, payload)
        return service.update(row_id, payload)

    @router.put("", summary=f"Update many {name}")
    def update_many(
        payload: dict[str, Any] = Body(...),
        ids: list[str] | None = Query(None, alias="id"),
        service: ResourceService = Depends(get_service),
    ):
        _LOG.info("update_many %s ids=%s fields=%s", name, ids, payload)
        return service.update_many(ids or [], payload)

    @router.delete("/{row_id}", status_code=204, response_class=Response, summary=f"Delete one of {name}")
    def delete(row_id: str, service: ResourceService = Depends(get_service)):
        _LOG.info("delete %s id=%s", name, row_id)
        service.delete(row_id)
        return Response(status_code=204)

    @router.delete("", summary=f"Delete many {name}")
    def delete_many(
        ids: list[str] | None = Query(None, alias="id"),
        service: ResourceService = Depends(get_service),
    ):
        _LOG.info("delete_many %s ids=%s", name, ids)
        return service.delete_many(ids or [])

    return router
