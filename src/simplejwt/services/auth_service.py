from __future__ import annotations

import hmac
import time
import uuid
from dataclasses import dataclass

from simplejwt.core.config import Settings
from simplejwt.core.exceptions import JwtError
from simplejwt.models.token import ParsedToken
from simplejwt.services.factory import JwtFactory


class TokenRejectedError(PermissionError):
    """Bearer token refused; ``code`` is the underlying token error code, 0 for service policy."""

    def __init__(self, message: str, code: int = 0) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class AuthUser:
    username: str
    claims: ParsedToken | None = None


class AuthService:
    def __init__(self, settings: Settings, factory: JwtFactory | None = None) -> None:
        self._settings = settings
        self._factory = factory or JwtFactory(additional_algorithms=settings.jwt_allowed_algorithms)

    @property
    def auth_enabled(self) -> bool:
        return self._settings.api_auth_enabled

    @property
    def token_ttl_seconds(self) -> int:
        return self._settings.jwt_access_token_ttl_seconds

    def issue_access_token(self, username: str, password: str) -> str:
        expected_username = self._settings.api_auth_username
        expected_password = self._settings.api_auth_password
        valid_username = hmac.compare_digest(username.encode("utf-8"), expected_username.encode("utf-8"))
        valid_password = hmac.compare_digest(password.encode("utf-8"), expected_password.encode("utf-8"))
        if not (valid_username and valid_password):
            raise PermissionError("Invalid username or password.")
        return self.issue_access_token_for_subject(expected_username)

    def issue_access_token_for_subject(self, subject: str) -> str:
        expected_username = self._settings.api_auth_username
        if not hmac.compare_digest(subject.encode("utf-8"), expected_username.encode("utf-8")):
            raise PermissionError("Invalid token subject.")
        now = int(time.time())
        token = (
            self._factory.builder()
            .set_secret(self._settings.jwt_secret_key)
            .set_issuer(self._settings.jwt_issuer)
            .set_subject(expected_username)
            .set_issued_at(now)
            .set_not_before(now)
            .set_expiration(now + self.token_ttl_seconds)
            .set_jwt_id(uuid.uuid4().hex)
            .build()
        )
        return token.raw

    def validate_access_token(self, token: str, now: int | None = None) -> AuthUser:
        try:
            (
                self._factory.validator(token, self._settings.jwt_secret_key)
                .structure()
                .algorithm_not_none()
                .signature()
                .expiration(now)
                .not_before(now)
            )
            claims = self._factory.parser(token, self._settings.jwt_secret_key).parse()
        except JwtError as exc:
            raise TokenRejectedError(str(exc), exc.code) from exc
        if not claims.get_subject():
            raise TokenRejectedError("Token is missing subject.")
        if claims.get_issuer() != self._settings.jwt_issuer:
            raise TokenRejectedError("Token issuer mismatch.")
        return AuthUser(username=claims.get_subject(), claims=claims)

    def inspect_token(self, token: str) -> ParsedToken:
        """Decode without verifying; decoding failures propagate as ``JwtError``."""
        return self._factory.parser(token, "").parse()
