from fastapi import APIRouter

from ra_server.api.resources import build_resource_router
from ra_server.services.posts import PostService
from ra_server.services.users import UserService

RESOURCES = (UserService, PostService)

router = APIRouter()
for service_cls in RESOURCES:
    router.include_router(build_resource_router(service_cls), prefix=f"/{service_cls.name}", tags=[service_cls.name])
