from __future__ import annotations

import hashlib
import hmac
from typing import Any, Protocol

from simplejwt.core.codec import Codec, b64url_encode


class Signer(Protocol):
    """Signing capability handed to the builder and validator."""

    def algorithm_name(self) -> str:
        ...

    def encode_claims(self, claims: dict[str, Any]) -> str:
        ...

    def sign(self, header_segment: str, payload_segment: str, secret: str) -> str:
        ...


class HS256Signer:
    ALGORITHM = "HS256"

    def __init__(self, codec: Codec | None = None) -> None:
        self._codec = codec or Codec()

    def algorithm_name(self) -> str:
        return self.ALGORITHM

    def encode_claims(self, claims: dict[str, Any]) -> str:
        return self._codec.encode_segment(claims)

    def sign(self, header_segment: str, payload_segment: str, secret: str) -> str:
        signing_input = f"{header_segment}.{payload_segment}".encode("utf-8")
        digest = hmac.new(secret.encode("utf-8"), signing_input, hashlib.sha256).digest()
        return b64url_encode(digest)
