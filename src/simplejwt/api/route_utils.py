from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Request

from simplejwt.core.exceptions import JwtError

T = TypeVar("T")

REQUEST_ID_HEADER = "X-Request-ID"
TOKEN_ERROR_HEADER = "X-Token-Error-Code"
SERVICE_ERROR_RESPONSES = {
    400: {"description": "Token could not be decoded or claims are invalid."},
    401: {"description": "Missing, invalid or expired bearer token."},
}


def request_id_of(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


def call_service_or_http(
    call: Callable[[], T],
    *,
    logger: logging.Logger,
    endpoint: str,
    context: dict[str, Any] | None = None,
) -> T:
    """Run a token operation, mapping token errors to 400 and refusals to 401.

    Token errors carry their numeric code in the ``X-Token-Error-Code`` header.
    """
    context_text = ""
    if context:
        context_text = " " + " ".join(f"{key}={value}" for key, value in context.items())
    try:
        return call()
    except PermissionError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except JwtError as exc:
        logger.warning("token.reject endpoint=%s code=%s%s detail=%s", endpoint, exc.code, context_text, str(exc))
        raise HTTPException(
            status_code=400,
            detail=str(exc),
            headers={TOKEN_ERROR_HEADER: str(exc.code)},
        ) from exc
    except ValueError as exc:
        logger.warning("Rejected request on %s endpoint%s: detail=%s", endpoint, context_text, str(exc))
        raise HTTPException(status_code=400, detail=str(exc)) from exc
