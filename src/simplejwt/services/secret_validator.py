from __future__ import annotations

import re
from typing import Protocol


class SecretValidatorProtocol(Protocol):
    def validate(self, secret: str) -> bool:
        ...


class SecretValidator:
    """Default secret policy: at least 12 characters with a digit, an upper and a lower case letter."""

    SECRET_PATTERN = re.compile(r"^(?=.{12,})(?=.*[0-9])(?=.*[A-Z])(?=.*[a-z]).*$", re.DOTALL)

    def validate(self, secret: str) -> bool:
        return isinstance(secret, str) and self.SECRET_PATTERN.match(secret) is not None
