import logging
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request

from simplejwt.api import router
from simplejwt.api.route_utils import REQUEST_ID_HEADER
from simplejwt.core.config import DEFAULT_SECRET_KEY, get_settings
from simplejwt.core.logging import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Authentication", "description": "HS256 JWT issuance, refresh and introspection."},
    {"name": "Tokens", "description": "Unverified token decoding for debugging."},
]

app = FastAPI(
    title="SimpleJWT Token API",
    version="1.0.0",
    description="Issues and verifies HMAC-SHA256 signed JSON Web Tokens.",
    openapi_tags=OPENAPI_TAGS,
)
app.include_router(router)

if get_settings().jwt_secret_key == DEFAULT_SECRET_KEY:
    logger.warning("JWT_SECRET_KEY is not set; using the built-in development secret.")


@app.middleware("http")
async def token_request_middleware(request: Request, call_next):
    """Tag each request with an id; the bearer dependency records the outcome on ``request.state``."""
    request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex[:12]
    started = perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request.error id=%s path=%s", request.state.request_id, request.url.path)
        raise
    response.headers[REQUEST_ID_HEADER] = request.state.request_id
    logger.info(
        "request.end id=%s %s %s status=%s subject=%s token_error=%s duration_ms=%.2f",
        request.state.request_id,
        request.method,
        request.url.path,
        response.status_code,
        getattr(request.state, "token_subject", "-"),
        getattr(request.state, "token_error_code", "-"),
        (perf_counter() - started) * 1000.0,
    )
    return response


__all__ = ["app"]
