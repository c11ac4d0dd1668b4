"""
Middleware components for the products API.

Provides request correlation and access logging.
"""

import time
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .request_context import new_request_id, set_request_id, clear_request_context
from ..shared.exceptions.handlers import general_exception_handler

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its outcome"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        set_request_id(request_id)
        start_time = time.time()

        logger.info(f"Request: {request.method} {request.url.path}")

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                # Unhandled errors would otherwise reach the outermost error
                # middleware after the request context is cleared
                response = await general_exception_handler(request, exc)

            process_time = time.time() - start_time
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.6f}"

            logger.info(
                f"Response: {request.method} {request.url.path} "
                f"- Status: {response.status_code} - Time: {process_time:.3f}s"
            )
            return response
        finally:
            clear_request_context()
