from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from simplejwt.api.dependencies import get_auth_service
from simplejwt.api.route_utils import SERVICE_ERROR_RESPONSES, call_service_or_http, request_id_of
from simplejwt.models import TokenInspectRequest, TokenInspectResponse
from simplejwt.services import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Tokens"])


@router.post(
    "/api/tokens/inspect",
    response_model=TokenInspectResponse,
    summary="Decode a token without verification",
    description="Splits a token and decodes its header and payload. The signature is returned as-is and not checked.",
    responses=SERVICE_ERROR_RESPONSES,
)
def inspect_token(
    payload: TokenInspectRequest,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenInspectResponse:
    parsed = call_service_or_http(
        lambda: auth_service.inspect_token(payload.token),
        logger=logger,
        endpoint="tokens/inspect",
        context={"id": request_id_of(request)},
    )
    return TokenInspectResponse(header=parsed.header, payload=parsed.payload, signature=parsed.signature)
