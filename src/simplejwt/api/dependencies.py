from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from simplejwt.api.route_utils import TOKEN_ERROR_HEADER, request_id_of
from simplejwt.core.config import Settings, get_settings
from simplejwt.services import AuthService, TokenRejectedError
from simplejwt.services.auth_service import AuthUser

logger = logging.getLogger(__name__)
http_bearer = HTTPBearer(auto_error=False)


@lru_cache(maxsize=4)
def _auth_service_for(settings: Settings) -> AuthService:
    return AuthService(settings=settings)


def get_auth_service(settings: Settings = Depends(get_settings)) -> AuthService:
    return _auth_service_for(settings)


def bearer_challenge(detail: str, code: int | None = None) -> HTTPException:
    """401 with an RFC 6750 challenge; a present-but-bad token adds ``error="invalid_token"``."""
    if code is None:
        headers = {"WWW-Authenticate": "Bearer"}
    else:
        headers = {
            "WWW-Authenticate": 'Bearer error="invalid_token"',
            TOKEN_ERROR_HEADER: str(code),
        }
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=headers)


def require_api_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthUser:
    if not auth_service.auth_enabled:
        return AuthUser(username="anonymous")

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise bearer_challenge("Missing bearer token.")
    try:
        user = auth_service.validate_access_token(credentials.credentials)
    except TokenRejectedError as exc:
        request.state.token_error_code = exc.code
        logger.warning("token.reject id=%s code=%s detail=%s", request_id_of(request), exc.code, exc)
        raise bearer_challenge(str(exc), exc.code) from exc
    request.state.token_subject = user.username
    return user


def clear_dependency_caches() -> None:
    _auth_service_for.cache_clear()
