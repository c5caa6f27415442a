"""Request logging middleware.

Logs every HTTP request with method, path, status code, latency, and a
request ID for correlation. The request ID is itself a snowflake drawn from
the process generator, so log lines sort by time. The request_id is also
injected into request.state so router handlers can include it in ApiResponse.

Every request, /health included, takes one sequence slot from the same
generator that serves /api/v1/ids, so backward-clock warnings and the
compensation sleep may be triggered here rather than by an ID request. When
the generator rejects the call the request falls back to a uuid4 request ID.

Log format:
    INFO [POST] /api/v1/ids → 201 (2ms) req_7267097612291928070
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.sf_snowflake.application.service import get_id_service

logger = logging.getLogger("sf.request")


def _new_request_id(request: Request) -> str:
    provider = request.app.dependency_overrides.get(get_id_service, get_id_service)
    sid = provider().generator.next_id()
    if sid is None:
        # generator rejected the call (clock drift); don't fail the request over it
        return f"req_{uuid.uuid4().hex[:12]}"
    return f"req_{sid}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = _new_request_id(request)

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.state.request_id,
        )
        return response
