import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ra_server.core.config import settings
from ra_server.core.http_hardening import install_http_hardening
from ra_server.api.resources import TOTAL_COUNT_HEADER
from ra_server.api.router import router as resources_router
from ra_server.data.demo_seed import seed_demo_data
from ra_server.db.session import Base, SessionLocal, engine

_LOG = logging.getLogger("ra_server")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    _LOG.setLevel(settings.LOG_LEVEL.upper())
    wants_bootstrap = settings.AUTO_CREATE_SCHEMA or settings.DEMO_SEED_ENABLED
    if wants_bootstrap and not settings.bootstrap_allowed:
        _LOG.warning("APP_ENV=%s: ignoring AUTO_CREATE_SCHEMA/DEMO_SEED_ENABLED", settings.APP_ENV)
    elif wants_bootstrap:
        if settings.AUTO_CREATE_SCHEMA:
            Base.metadata.create_all(bind=engine)
        if settings.DEMO_SEED_ENABLED:
            with SessionLocal() as db:
                seed_demo_data(db)
    yield


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
origins = settings.cors_origins_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[TOTAL_COUNT_HEADER],
)
install_http_hardening(app)

app.include_router(resources_router, prefix=settings.API_PREFIX)

@app.get("/", include_in_schema=False)
def landing():
    return JSONResponse({"service": settings.APP_NAME, "status": "ok"})

@app.get("/health")
def health():
    return {"status": "ok"}
