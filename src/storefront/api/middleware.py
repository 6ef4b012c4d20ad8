"""HTTP middleware: domain context per request and one access-log line per request."""

import time
from uuid import uuid4

from fastapi import FastAPI, Request
from protean.domain import Domain

from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger("storefront.http")


def install_middleware(app: FastAPI, domain: Domain) -> None:
    """Wrap every request in ``domain``'s context and log it.

    The logging middleware is registered last so it runs outermost.
    """

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context for the duration of the request."""
        with domain.domain_context():
            response = await call_next(request)
        return response

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        clear_context()
        add_context(request_id=request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "http.request_failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        finally:
            clear_context()

        logger.info(
            "http.request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            client=request.client.host if request.client else None,
            request_id=request_id,
        )
        response.headers["X-Request-ID"] = request_id
        return response
