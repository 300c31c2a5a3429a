from __future__ import annotations

from typing import Any

from simplejwt.core.codec import Codec
from simplejwt.core.exceptions import DecodingError, MissingClaimError
from simplejwt.models.token import Audience, Claims, ParsedToken, Token


def _as_timestamp(value: Any, claim: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodingError(f"Claim {claim} is not a numeric timestamp.")
    return int(value)


class JwtParser:
    """Splits a Token into its segments and decodes header and payload.

    Structure is not checked here. A token with fewer than three segments
    reads the missing ones as empty strings, so strict claim accessors raise
    ``MissingClaimError`` rather than a structural error.
    """

    def __init__(self, token: Token, codec: Codec | None = None) -> None:
        self._token = token
        self._codec = codec or Codec()

    def split_segments(self) -> list[str]:
        parts = self._token.raw.split(".")
        return [parts[index] if index < len(parts) else "" for index in range(3)]

    def get_header_segment(self) -> str:
        return self.split_segments()[0]

    def get_payload_segment(self) -> str:
        return self.split_segments()[1]

    def get_signature(self) -> str:
        return self.split_segments()[2]

    def get_decoded_header(self) -> Claims:
        return self._codec.decode_segment(self.get_header_segment())

    def get_decoded_payload(self) -> Claims:
        return self._codec.decode_segment(self.get_payload_segment())

    def parse(self) -> ParsedToken:
        return ParsedToken(
            token=self._token,
            header=self.get_decoded_header(),
            payload=self.get_decoded_payload(),
            signature=self.get_signature(),
        )

    def get_expiration(self) -> int:
        value = self._require(self.get_decoded_payload(), "exp", "Expiration claim is not set.", 6)
        return _as_timestamp(value, "exp")

    def get_not_before(self) -> int:
        value = self._require(self.get_decoded_payload(), "nbf", "Not Before claim is not set.", 7)
        return _as_timestamp(value, "nbf")

    def get_audience(self) -> Audience:
        return self._require(self.get_decoded_payload(), "aud", "Audience claim is not set.", 11)

    def get_algorithm(self) -> str:
        return str(self._require(self.get_decoded_header(), "alg", "Algorithm claim is not set.", 13))

    def get_token(self) -> str:
        return self._token.raw

    def get_secret(self) -> str:
        return self._token.secret

    @staticmethod
    def _require(claims: Claims, key: str, message: str, code: int) -> Any:
        value = claims.get(key)
        if value is None:
            raise MissingClaimError(message, code, key)
        return value
