from __future__ import annotations

import hmac
import re
import time
from typing import Any, Iterable, Protocol

STRUCTURE_PATTERN = re.compile(r"[a-zA-Z0-9\-_=]+\.[a-zA-Z0-9\-_=]+\.[a-zA-Z0-9\-_=]+")


def _now(now: int | None) -> int:
    return int(time.time()) if now is None else int(now)


class ClaimRulesProtocol(Protocol):
    def structure(self, token: str) -> bool:
        ...

    def expiration(self, expiration: int, now: int | None = None) -> bool:
        ...

    def not_before(self, not_before: int, now: int | None = None) -> bool:
        ...

    def signature(self, generated: str, provided: str) -> bool:
        ...

    def audience(self, audience: Any, check: str) -> bool:
        ...

    def algorithm(self, algorithm: str, allowed: Iterable[str]) -> bool:
        ...


class ClaimRules:
    """Boolean predicates used by the builder and validator gates."""

    def structure(self, token: str) -> bool:
        return isinstance(token, str) and STRUCTURE_PATTERN.fullmatch(token) is not None

    def expiration(self, expiration: int, now: int | None = None) -> bool:
        # exp == now counts as expired.
        return int(expiration) > _now(now)

    def not_before(self, not_before: int, now: int | None = None) -> bool:
        return int(not_before) <= _now(now)

    def signature(self, generated: str, provided: str) -> bool:
        return hmac.compare_digest(generated.encode("utf-8"), provided.encode("utf-8"))

    def audience(self, audience: Any, check: str) -> bool:
        if isinstance(audience, str):
            return audience == check
        if isinstance(audience, list):
            return check in audience
        return False

    def algorithm(self, algorithm: str, allowed: Iterable[str]) -> bool:
        return algorithm in set(allowed)
