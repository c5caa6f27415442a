"""Snowflake ID API router: generate, decode.

All endpoints return ApiResponse. request_id is read from request.state
(injected by RequestLogMiddleware).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from config.settings import settings
from src.sf_common.response import ApiResponse, success_response
from src.sf_snowflake.application.schemas import IdEncoding
from src.sf_snowflake.application.service import IdService, get_id_service

router = APIRouter(prefix="/ids", tags=["ids"])


def _get_request_id(request: Request) -> str:
    """Read request_id injected by RequestLogMiddleware, fallback if absent."""
    return getattr(request.state, "request_id", "req_unknown")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
    summary="Generate snowflake IDs",
)
async def generate_ids(
    request: Request,
    service: Annotated[IdService, Depends(get_id_service)],
    count: int = Query(1, ge=1, le=settings.ID_BATCH_MAX, description="Number of IDs"),
) -> ApiResponse:
    data = service.generate(count)
    resp = success_response(data.model_dump())
    resp.request_id = _get_request_id(request)
    return resp


@router.get(
    "/{value}",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse,
    summary="Decode a snowflake ID",
)
async def decode_id(
    request: Request,
    value: str,
    service: Annotated[IdService, Depends(get_id_service)],
    encoding: IdEncoding = Query("decimal", description="decimal or base64"),
) -> ApiResponse:
    data = service.decode(value, encoding)
    resp = success_response(data.model_dump())
    resp.request_id = _get_request_id(request)
    return resp
