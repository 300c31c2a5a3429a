from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Union

JsonValue = Union[str, int, float, bool, None, list[Any], dict[str, Any]]
Claims = dict[str, JsonValue]
Audience = Union[str, list[str]]


@dataclass(frozen=True)
class Token:
    """A raw ``header.payload.signature`` string paired with its secret.

    The string is not checked here; the builder produces well-formed values and
    the validator's structure gate checks anything received from outside.
    """

    raw: str
    secret: str = field(repr=False)

    def __str__(self) -> str:
        return self.raw


def _now(now: int | None) -> int:
    return int(time.time()) if now is None else int(now)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class ParsedToken:
    """Read-only view over a decoded token.

    Accessors never raise: absent or mistyped claims read as ``""`` or ``0``.
    """

    token: Token
    header: Claims
    payload: Claims
    signature: str

    def get_algorithm(self) -> str:
        return _as_str(self.header.get("alg"))

    def get_type(self) -> str:
        return _as_str(self.header.get("typ"))

    def get_content_type(self) -> str:
        return _as_str(self.header.get("cty"))

    def get_issuer(self) -> str:
        return _as_str(self.payload.get("iss"))

    def get_subject(self) -> str:
        return _as_str(self.payload.get("sub"))

    def get_audience(self) -> Audience:
        audience = self.payload.get("aud")
        if isinstance(audience, list):
            return [item for item in audience if isinstance(item, str)]
        return _as_str(audience)

    def get_expiration(self) -> int:
        return _as_int(self.payload.get("exp"))

    def get_expires_in(self, now: int | None = None) -> int:
        return max(0, self.get_expiration() - _now(now))

    def get_not_before(self) -> int:
        return _as_int(self.payload.get("nbf"))

    def get_usable_in(self, now: int | None = None) -> int:
        return max(0, self.get_not_before() - _now(now))

    def get_issued_at(self) -> int:
        return _as_int(self.payload.get("iat"))

    def get_jwt_id(self) -> str:
        return _as_str(self.payload.get("jti"))
