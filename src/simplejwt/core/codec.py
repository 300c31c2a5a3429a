from __future__ import annotations

import base64
import binascii
import json
import re
from typing import Any

from simplejwt.core.exceptions import DecodingError, EncodingError

_URLSAFE_SEGMENT = re.compile(r"[A-Za-z0-9\-_]*={0,2}")


def b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def b64url_decode(raw: str) -> bytes:
    """Strict Base64URL decode; characters outside the URL-safe alphabet are rejected."""
    if not _URLSAFE_SEGMENT.fullmatch(raw):
        raise DecodingError("Segment contains characters outside the Base64URL alphabet.")
    unpadded = raw.rstrip("=")
    padding = "=" * (-len(unpadded) % 4)
    standard = (unpadded + padding).replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(standard, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError(f"Segment is not valid Base64URL: {exc}") from exc


def _json_compact(data: dict[str, Any]) -> bytes:
    return json.dumps(data, separators=(",", ":"), sort_keys=True).encode("utf-8")


class Codec:
    """Canonical JSON <-> unpadded Base64URL transcoding for header and payload segments."""

    def encode_segment(self, claims: dict[str, Any]) -> str:
        try:
            return b64url_encode(_json_compact(claims))
        except (TypeError, ValueError, RecursionError) as exc:
            raise EncodingError(f"Claims are not JSON serialisable: {exc}") from exc

    def decode_segment(self, segment: str) -> dict[str, Any]:
        # Truncated tokens leave empty segments; these read as "no claims".
        if segment == "":
            return {}
        raw = b64url_decode(segment)
        try:
            decoded = json.loads(raw.decode("utf-8"))
        except (ValueError, RecursionError) as exc:
            raise DecodingError(f"Segment is not valid JSON: {exc}") from exc
        if not isinstance(decoded, dict):
            raise DecodingError("Segment does not decode to a JSON object.")
        return decoded
