import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


def _get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request: method, path, status, duration, client ip.

    Bodies, cookies and query strings are never logged.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration = time.perf_counter() - start_time
            logger.error(
                f"Request error: {request.method} {request.url.path} "
                f"duration={duration:.3f}s from {_get_client_ip(request)}"
            )
            raise

        duration = time.perf_counter() - start_time
        logger.info(
            f"Response: {request.method} {request.url.path} "
            f"status={response.status_code}, duration={duration:.3f}s "
            f"from {_get_client_ip(request)}"
        )
        return response
