from __future__ import annotations

import logging

import pytest
from fastapi import HTTPException

from simplejwt.api.route_utils import call_service_or_http
from simplejwt.core.exceptions import DecodingError


def test_call_service_or_http_returns_result():
    assert call_service_or_http(lambda: 42, logger=logging.getLogger("test"), endpoint="tokens/test") == 42


def test_call_service_or_http_maps_jwt_error_to_400():
    with pytest.raises(HTTPException) as exc:
        call_service_or_http(
            lambda: (_ for _ in ()).throw(DecodingError("Segment is not valid JSON")),
            logger=logging.getLogger("test"),
            endpoint="tokens/test",
            context={"segment": "payload"},
        )
    assert exc.value.status_code == 400
    assert exc.value.detail == "Segment is not valid JSON"


def test_call_service_or_http_maps_permission_error_to_401():
    with pytest.raises(HTTPException) as exc:
        call_service_or_http(
            lambda: (_ for _ in ()).throw(PermissionError("Signature is invalid.")),
            logger=logging.getLogger("test"),
            endpoint="tokens/test",
        )
    assert exc.value.status_code == 401
    assert exc.value.detail == "Signature is invalid."


def test_call_service_or_http_reports_token_error_code_header():
    with pytest.raises(HTTPException) as exc:
        call_service_or_http(
            lambda: (_ for _ in ()).throw(DecodingError("Segment is not valid JSON")),
            logger=logging.getLogger("test"),
            endpoint="tokens/test",
        )
    assert exc.value.headers == {"X-Token-Error-Code": "15"}
