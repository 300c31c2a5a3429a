from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field


class AuthTokenRequest(BaseModel):
    username: str
    password: str


class AuthTokenResponse(BaseModel):
    access_token: str = Field(alias="accessToken")
    token_type: str = Field(default="bearer", alias="tokenType")
    expires_in_seconds: int = Field(alias="expiresInSeconds")


class TokenClaimsResponse(BaseModel):
    subject: str
    issuer: str
    audience: Union[str, list[str]] = ""
    jwt_id: str = Field(default="", alias="jwtId")
    issued_at: int = Field(default=0, alias="issuedAt")
    expires_in_seconds: int = Field(alias="expiresInSeconds")
    usable_in_seconds: int = Field(default=0, alias="usableInSeconds")
    header: dict[str, Any] = Field(default_factory=dict)


class TokenInspectRequest(BaseModel):
    token: str = Field(min_length=1)


class TokenInspectResponse(BaseModel):
    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str
