"""FastAPI application entry point."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import data, health, shipping, warehouses
from .config import settings
from .exceptions import NoCandidates, NotFound, ShippingError
from .schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)


def _status_for(exc: ShippingError) -> int:
    if isinstance(exc, (NotFound, NoCandidates)):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


async def handle_shipping_error(request: Request, exc: ShippingError) -> JSONResponse:
    status_code = _status_for(exc)
    trace_id = uuid.uuid4().hex[:16]
    logger.warning(f"{type(exc).__name__} [traceId={trace_id}]: {exc.message}")
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        status=status_code,
        error="Not Found" if status_code == status.HTTP_404_NOT_FOUND else "Bad Request",
        message=exc.message,
        path=request.url.path,
        field=exc.field,
        value=exc.value,
        traceId=trace_id,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body, exclude_none=True))


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title=settings.app_name)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_exception_handler(ShippingError, handle_shipping_error)

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(warehouses.router, prefix=settings.api_prefix)
    app.include_router(shipping.router, prefix=settings.api_prefix)
    app.include_router(data.router, prefix=settings.api_prefix)
    return app


app = create_app()
