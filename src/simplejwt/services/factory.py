"""Factory wiring the default collaborators, plus the module-level convenience calls.

``generate``, ``validate`` and ``get_payload`` cover the common case of a flat
claim map signed with HS256::

    token = generate({"sub": "user-42", "role": "admin"}, "Abcdefgh123!")
    validate(token, "Abcdefgh123!")      # True
    get_payload(token, "Abcdefgh123!")   # {"role": "admin", "sub": "user-42"}
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from simplejwt.core.codec import Codec
from simplejwt.core.exceptions import InvalidPayloadClaimError, JwtError
from simplejwt.core.signer import HS256Signer
from simplejwt.models.token import Claims, Token
from simplejwt.services.builder import JwtBuilder
from simplejwt.services.claim_rules import ClaimRules
from simplejwt.services.parser import JwtParser
from simplejwt.services.secret_validator import SecretValidator
from simplejwt.services.validator import JwtValidator

logger = logging.getLogger(__name__)


class JwtFactory:
    def __init__(self, additional_algorithms: Iterable[str] = ()) -> None:
        self._codec = Codec()
        self._additional_algorithms = tuple(additional_algorithms)

    def builder(self) -> JwtBuilder:
        return JwtBuilder("JWT", ClaimRules(), SecretValidator(), HS256Signer(self._codec))

    def parser(self, token: str, secret: str) -> JwtParser:
        return JwtParser(Token(raw=token, secret=secret), self._codec)

    def validator(self, token: str, secret: str) -> JwtValidator:
        return JwtValidator(
            self.parser(token, secret),
            HS256Signer(self._codec),
            ClaimRules(),
            additional_algorithms=self._additional_algorithms,
        )

    def generate(self, payload: Mapping[Any, Any], secret: str) -> Token:
        builder = self.builder()
        checked_setters = {
            "exp": builder.set_expiration,
            "nbf": builder.set_not_before,
            "iat": builder.set_issued_at,
            "aud": builder.set_audience,
        }
        for key, value in payload.items():
            if not isinstance(key, str):
                raise InvalidPayloadClaimError("Invalid payload claim.")
            setter = checked_setters.get(key)
            if setter is not None:
                setter(value)
            else:
                builder.set_payload_claim(key, value)
        return builder.set_secret(secret).build()

    def validate(self, token: str, secret: str) -> bool:
        try:
            self.validator(token, secret).structure().algorithm_not_none().signature()
        except JwtError as exc:
            logger.debug("token.validate rejected code=%s reason=%s", exc.code, type(exc).__name__)
            return False
        return True

    def get_payload(self, token: str, secret: str) -> Claims:
        return self.parser(token, secret).parse().payload


def generate(payload: Mapping[Any, Any], secret: str) -> str:
    return JwtFactory().generate(payload, secret).raw


def validate(token: str, secret: str) -> bool:
    return JwtFactory().validate(token, secret)


def get_payload(token: str, secret: str) -> Claims:
    return JwtFactory().get_payload(token, secret)
