from simplejwt.models.auth import (
    AuthTokenRequest,
    AuthTokenResponse,
    TokenClaimsResponse,
    TokenInspectRequest,
    TokenInspectResponse,
)
from simplejwt.models.token import Audience, Claims, JsonValue, ParsedToken, Token

__all__ = [
    "AuthTokenRequest",
    "AuthTokenResponse",
    "TokenClaimsResponse",
    "TokenInspectRequest",
    "TokenInspectResponse",
    "Audience",
    "Claims",
    "JsonValue",
    "ParsedToken",
    "Token",
]
