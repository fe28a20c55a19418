# crewhub/core/logging_middleware.py
"""HTTP audit logging middleware."""
import logging
from time import perf_counter

from fastapi import FastAPI, Request

logger = logging.getLogger("crewhub.audit")


def add_audit_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def audit_logger(request: Request, call_next):  # type: ignore[override]
        start = perf_counter()
        # Reported when the handler raises instead of returning
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (perf_counter() - start) * 1000
            client_ip = request.client.host if request.client else "unknown"
            logger.info(
                "%s %s | status=%s | client=%s | duration=%.2fms",
                request.method,
                request.url.path,
                status_code,
                client_ip,
                duration_ms,
            )
