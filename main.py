"""
FoodBin FastAPI Application

The door mode and capacity come from settings and are fixed for the life of
the process. Run with ``python main.py`` or ``uvicorn main:app``.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import storage, health
from api.dependencies import get_storage_service, reset_storage_service
from api import middleware
from app.config import settings
from app.exceptions import ServiceValidationError, NotFoundError, ConflictError

logging.basicConfig(level=settings.log_level, format=settings.log_format)
_logger = logging.getLogger("foodbin.main")

EXCEPTION_HANDLERS = {
    RequestValidationError: middleware.validation_exception_handler,
    StarletteHTTPException: middleware.http_exception_handler,
    ServiceValidationError: middleware.service_validation_exception_handler,
    NotFoundError: middleware.not_found_exception_handler,
    ConflictError: middleware.conflict_exception_handler,
    Exception: middleware.general_exception_handler,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = get_storage_service()
    _logger.info(
        "FoodBin up (%s): %s bin with %d slots",
        settings.environment.value,
        service.mode.value.upper(),
        service.storage.capacity,
    )
    try:
        yield
    finally:
        # in-memory only, contents are gone after this
        _logger.info("FoodBin down, discarding %d item(s)", service.storage.size())
        reset_storage_service()


def _docs_path(name: str):
    return None if settings.is_production() else f"{settings.api_prefix}/{name}"


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=_docs_path("openapi.json"),
    docs_url=_docs_path("docs"),
    redoc_url=_docs_path("redoc"),
    exception_handlers=EXCEPTION_HANDLERS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(middleware.RequestLoggingMiddleware)

for module in (storage, health):
    app.include_router(module.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
