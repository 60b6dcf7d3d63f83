"""
HTTP middleware making up the outer part of the request pipeline.

``create_app`` registers them so that, from the outside in, a request passes
``log_requests`` -> ``catch_unexpected_errors`` -> ``authenticate`` and then
reaches the router.
"""

import logging
import time

from fastapi import Request

from .auth import evaluate
from .errors import request_target, error_response

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, request_target(request), response.status_code, elapsed_ms)
    return response


async def catch_unexpected_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while processing %s %s", request.method, request_target(request))
        return error_response(500, "Internal Server Error", "An unexpected error occurred")


async def authenticate(request: Request, call_next):
    settings = request.app.state.settings
    decision = evaluate(
        settings.auth_mode,
        request.method,
        request.url.path,
        request.headers,
        api_key=settings.api_key,
    )
    if not decision.allowed:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, decision.message)
        headers = {"WWW-Authenticate": decision.challenge} if decision.challenge else None
        return error_response(401, decision.error, decision.message, headers=headers)
    return await call_next(request)
