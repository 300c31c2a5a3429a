import time

import pytest

import simplejwt
from simplejwt.core.codec import Codec
from simplejwt.core.exceptions import (
    DecodingError,
    ExpiredClaimError,
    InvalidAudienceError,
    InvalidPayloadClaimError,
    InvalidTimestampClaimError,
    WeakSecretError,
)
from simplejwt.services.factory import JwtFactory, generate, get_payload, validate

SECRET = "Abcdefgh123!"


def test_end_to_end_example():
    token = generate({"sub": "user-42", "role": "admin"}, SECRET)

    assert token.count(".") == 2
    assert validate(token, SECRET) is True
    assert validate(token, "WrongSecret123") is False
    assert get_payload(token, SECRET) == {"sub": "user-42", "role": "admin"}


def test_package_exports_convenience_calls():
    token = simplejwt.generate({"sub": "user-42"}, SECRET)
    assert simplejwt.validate(token, SECRET)


def test_round_trip_preserves_json_values():
    payload = {
        "sub": "user-42",
        "aud": ["api", "web"],
        "exp": int(time.time()) + 3600,
        "roles": ["a", "b"],
        "profile": {"name": "Ada", "tags": [1, 2.5, None, True]},
        "unicode": "héllo",
    }
    assert get_payload(generate(payload, SECRET), SECRET) == payload


def test_tampered_signature_character_fails_validation():
    token = generate({"sub": "user-42"}, SECRET)
    header, payload, signature = token.split(".")
    for index in range(len(signature)):
        flipped = "A" if signature[index] != "A" else "B"
        tampered = f"{header}.{payload}.{signature[:index]}{flipped}{signature[index + 1:]}"
        assert validate(tampered, SECRET) is False


def test_wrong_secret_fails_validation():
    token = generate({"sub": "user-42"}, SECRET)
    assert validate(token, "Abcdefgh123?") is False
    assert validate(token, "") is False


def test_alg_none_downgrade_fails_for_any_secret():
    codec = Codec()
    forged = f"{codec.encode_segment({'alg': 'none', 'typ': 'JWT'})}.{codec.encode_segment({'sub': 'admin'})}."
    for secret in (SECRET, "", "anything"):
        assert validate(forged, secret) is False
        assert validate(forged + "c2ln", secret) is False


def test_validate_never_raises_on_garbage():
    for raw in ("", "....", "a.b.c", "e30.e30.e30", "not a token at all", "é.é.é"):
        assert validate(raw, SECRET) is False


def test_generate_rejects_integer_keys():
    with pytest.raises(InvalidPayloadClaimError) as exc:
        generate({"sub": "user-42", 0: "zero"}, SECRET)
    assert exc.value.code == 8


def test_generate_rejects_weak_secret():
    with pytest.raises(WeakSecretError):
        generate({"sub": "user-42"}, "weak")


def test_generate_routes_registered_claims_through_checked_setters():
    with pytest.raises(ExpiredClaimError):
        generate({"exp": int(time.time()) - 10}, SECRET)
    with pytest.raises(InvalidAudienceError):
        generate({"aud": 5}, SECRET)


def test_get_payload_skips_verification():
    token = generate({"sub": "user-42"}, SECRET)
    assert get_payload(token, "some-other-secret") == {"sub": "user-42"}


def test_get_payload_propagates_decode_failures():
    with pytest.raises(DecodingError):
        get_payload("e30.not*base64.sig", SECRET)


def test_get_payload_of_truncated_token_is_empty():
    assert get_payload("e30", SECRET) == {}


def test_factory_generate_returns_token_object():
    token = JwtFactory().generate({"sub": "user-42"}, SECRET)
    assert token.secret == SECRET
    assert str(token) == token.raw
    assert SECRET not in repr(token)


def test_validate_returns_false_for_oversized_integer_header():
    from simplejwt.core.codec import b64url_encode

    header = b64url_encode(b'{"alg":' + b"1" * 5000 + b"}")
    assert validate(f"{header}.e30.c2ln", SECRET) is False


def test_validate_returns_false_for_deeply_nested_header():
    from simplejwt.core.codec import b64url_encode

    header = b64url_encode(b"[" * 100000)
    assert validate(f"{header}.e30.c2ln", SECRET) is False
    with pytest.raises(DecodingError):
        get_payload(f"e30.{header}.c2ln", SECRET)


@pytest.mark.parametrize("claim", ["exp", "nbf", "iat"])
@pytest.mark.parametrize("value", ["soon", None, "1999999999", 1.5, True])
def test_generate_rejects_non_integer_timestamps(claim, value):
    with pytest.raises(InvalidTimestampClaimError) as exc:
        generate({"sub": "user-42", claim: value}, SECRET)
    assert exc.value.code == 17
