from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from simplejwt.api.dependencies import get_auth_service, require_api_user
from simplejwt.api.route_utils import SERVICE_ERROR_RESPONSES
from simplejwt.models import AuthTokenRequest, AuthTokenResponse, TokenClaimsResponse
from simplejwt.services import AuthService
from simplejwt.services.auth_service import AuthUser

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Authentication"])


@router.post(
    "/api/auth/token",
    response_model=AuthTokenResponse,
    summary="Issue JWT access token",
    description="Authenticates API user credentials and returns a short-lived HS256 bearer token.",
    responses={401: {"description": "Invalid credentials."}},
)
def issue_access_token(
    payload: AuthTokenRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthTokenResponse:
    try:
        token = auth_service.issue_access_token(payload.username, payload.password)
    except PermissionError as exc:
        logger.warning("Authentication failed for username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        ) from exc

    logger.info("Issued access token for username=%s", payload.username)
    return AuthTokenResponse(
        accessToken=token,
        tokenType="bearer",
        expiresInSeconds=auth_service.token_ttl_seconds,
    )


@router.post(
    "/api/auth/refresh",
    response_model=AuthTokenResponse,
    summary="Refresh JWT access token",
    description="Issues a new bearer token for the subject of a valid bearer token.",
    responses={401: {"description": "Invalid or expired bearer token."}},
)
def refresh_access_token(
    auth_user: AuthUser = Depends(require_api_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthTokenResponse:
    try:
        token = auth_service.issue_access_token_for_subject(auth_user.username)
    except PermissionError as exc:
        logger.warning("Token refresh denied for username=%s", auth_user.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc
    logger.info("Refreshed access token for username=%s", auth_user.username)
    return AuthTokenResponse(
        accessToken=token,
        tokenType="bearer",
        expiresInSeconds=auth_service.token_ttl_seconds,
    )


@router.get(
    "/api/auth/me",
    response_model=TokenClaimsResponse,
    summary="Describe the current bearer token",
    description="Returns the verified claims carried by the bearer token.",
    responses=SERVICE_ERROR_RESPONSES,
)
def describe_access_token(auth_user: AuthUser = Depends(require_api_user)) -> TokenClaimsResponse:
    claims = auth_user.claims
    if claims is None:
        return TokenClaimsResponse(subject=auth_user.username, issuer="", expiresInSeconds=0)
    return TokenClaimsResponse(
        subject=claims.get_subject(),
        issuer=claims.get_issuer(),
        audience=claims.get_audience(),
        jwtId=claims.get_jwt_id(),
        issuedAt=claims.get_issued_at(),
        expiresInSeconds=claims.get_expires_in(),
        usableInSeconds=claims.get_usable_in(),
        header=claims.header,
    )
