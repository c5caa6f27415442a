"""FastAPI application entry point.

Run with: uvicorn src.main:app --loop uvloop --port 8000
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.sf_common.errors import AppError
from src.sf_common.response import error_response
from src.sf_gateway.middleware.request_log import RequestLogMiddleware
from src.sf_snowflake.api.router import router as ids_router
from src.sf_snowflake.application.service import IdService, get_id_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: build the generator so a bad node id / epoch fails fast."""
    service = get_id_service()
    logger.info("%s started, node_id=%d", settings.APP_NAME, service.generator.node_id)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, getattr(request.state, "request_id", None))
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(ids_router, prefix="/api/v1")


@app.get("/health")
async def health(
    service: Annotated[IdService, Depends(get_id_service)],
) -> dict[str, str | int]:
    return {"status": "ok", "version": APP_VERSION, "node_id": service.generator.node_id}
