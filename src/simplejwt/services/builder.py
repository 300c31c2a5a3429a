from __future__ import annotations

import logging
from typing import Any

from simplejwt.core.exceptions import (
    ExpiredClaimError,
    InvalidAudienceError,
    InvalidTimestampClaimError,
    WeakSecretError,
)
from simplejwt.core.signer import Signer
from simplejwt.models.token import Claims, Token
from simplejwt.services.claim_rules import ClaimRulesProtocol
from simplejwt.services.secret_validator import SecretValidatorProtocol

logger = logging.getLogger(__name__)


def _require_timestamp(value: Any, claim: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimestampClaimError(f"Claim {claim} must be an integer Unix timestamp.")
    return value


class JwtBuilder:
    """Accumulates header and payload claims and assembles a signed Token.

    Setters return the builder so calls chain::

        token = (
            factory.builder()
            .set_secret("Abcdefgh123!")
            .set_subject("user-42")
            .set_expiration(int(time.time()) + 3600)
            .build()
        )

    A builder is meant for a single token; ``reset()`` hands back a fresh one
    with the same collaborators.
    """

    def __init__(
        self,
        token_type: str,
        claim_rules: ClaimRulesProtocol,
        secret_validator: SecretValidatorProtocol,
        signer: Signer,
    ) -> None:
        self._type = token_type
        self._claim_rules = claim_rules
        self._secret_validator = secret_validator
        self._signer = signer
        self._header: Claims = {}
        self._payload: Claims = {}
        self._secret = ""

    def set_content_type(self, content_type: str) -> JwtBuilder:
        self._header["cty"] = content_type
        return self

    def set_header_claim(self, key: str, value: Any) -> JwtBuilder:
        self._header[key] = value
        return self

    def get_header(self) -> Claims:
        return {**self._header, "alg": self._signer.algorithm_name(), "typ": self._type}

    def set_secret(self, secret: str) -> JwtBuilder:
        if not self._secret_validator.validate(secret):
            raise WeakSecretError("Invalid secret.")
        self._secret = secret
        return self

    def set_issuer(self, issuer: str) -> JwtBuilder:
        self._payload["iss"] = issuer
        return self

    def set_subject(self, subject: str) -> JwtBuilder:
        self._payload["sub"] = subject
        return self

    def set_audience(self, audience: Any) -> JwtBuilder:
        if isinstance(audience, str):
            self._payload["aud"] = audience
            return self
        if isinstance(audience, (list, tuple)) and all(isinstance(item, str) for item in audience):
            self._payload["aud"] = list(audience)
            return self
        raise InvalidAudienceError("Invalid Audience claim.")

    def set_expiration(self, timestamp: int) -> JwtBuilder:
        timestamp = _require_timestamp(timestamp, "exp")
        if not self._claim_rules.expiration(timestamp):
            raise ExpiredClaimError("Expiration claim has expired.")
        self._payload["exp"] = timestamp
        return self

    def set_not_before(self, not_before: int) -> JwtBuilder:
        self._payload["nbf"] = _require_timestamp(not_before, "nbf")
        return self

    def set_issued_at(self, issued_at: int) -> JwtBuilder:
        self._payload["iat"] = _require_timestamp(issued_at, "iat")
        return self

    def set_jwt_id(self, jwt_id: str) -> JwtBuilder:
        self._payload["jti"] = jwt_id
        return self

    def set_payload_claim(self, key: str, value: Any) -> JwtBuilder:
        self._payload[key] = value
        return self

    def get_payload(self) -> Claims:
        return dict(self._payload)

    def get_signature(self) -> str:
        return self._sign(
            self._signer.encode_claims(self.get_header()),
            self._signer.encode_claims(self.get_payload()),
        )

    def build(self) -> Token:
        header_segment = self._signer.encode_claims(self.get_header())
        payload_segment = self._signer.encode_claims(self.get_payload())
        signature = self._sign(header_segment, payload_segment)
        logger.debug(
            "token.build alg=%s header_claims=%d payload_claims=%d",
            self._signer.algorithm_name(),
            len(self.get_header()),
            len(self._payload),
        )
        return Token(raw=f"{header_segment}.{payload_segment}.{signature}", secret=self._secret)

    def reset(self) -> JwtBuilder:
        return JwtBuilder(self._type, self._claim_rules, self._secret_validator, self._signer)

    def _sign(self, header_segment: str, payload_segment: str) -> str:
        if not self._secret_validator.validate(self._secret):
            raise WeakSecretError("Invalid secret.")
        return self._signer.sign(header_segment, payload_segment, self._secret)
