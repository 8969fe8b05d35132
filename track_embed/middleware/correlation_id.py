import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from track_embed.config.logger import logger, correlation_id_ctx

class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", str(uuid.uuid4()))
        token = correlation_id_ctx.set(correlation_id)

        try:
            logger.info(f"Request received: {request.method} {request.url}")
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"Response sent: {response.status_code} in {elapsed_ms:.1f}ms")
        finally:
            correlation_id_ctx.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id

        return response
