import time

import pytest

from simplejwt.core.codec import Codec
from simplejwt.core.exceptions import (
    AlgorithmError,
    AudienceMismatchError,
    ExpiredClaimError,
    MissingClaimError,
    NotBeforeError,
    SignatureError,
    StructureError,
)
from simplejwt.core.signer import HS256Signer
from simplejwt.services.claim_rules import ClaimRules
from simplejwt.services.factory import JwtFactory

SECRET = "Abcdefgh123!"


def assemble(header: dict, payload: dict, secret: str = SECRET) -> str:
    codec = Codec()
    header_segment = codec.encode_segment(header)
    payload_segment = codec.encode_segment(payload)
    signature = HS256Signer().sign(header_segment, payload_segment, secret)
    return f"{header_segment}.{payload_segment}.{signature}"


def issued_token(**claims) -> str:
    builder = JwtFactory().builder().set_secret(SECRET)
    for key, value in claims.items():
        builder.set_payload_claim(key, value)
    return builder.build().raw


def test_gates_chain_and_return_validator():
    validator = JwtFactory().validator(issued_token(sub="user-42"), SECRET)
    assert validator.structure().algorithm_not_none().signature() is validator


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "a.b", "a.b.c.d", "a..c", "a.b!.c", "a.b.c\n", "a b.c.d", "é.b.c"],
)
def test_structure_rejects_malformed_tokens(raw):
    with pytest.raises(StructureError) as exc:
        JwtFactory().validator(raw, SECRET).structure()
    assert exc.value.code == 1


def test_structure_accepts_padding_characters():
    JwtFactory().validator("ab==.cd=.ef", SECRET).structure()


def test_algorithm_none_is_rejected_case_insensitively():
    for alg in ("none", "None", "NONE"):
        raw = assemble({"alg": alg, "typ": "JWT"}, {"sub": "user-42"})
        with pytest.raises(AlgorithmError) as exc:
            JwtFactory().validator(raw, SECRET).algorithm_not_none()
        assert exc.value.code == 14


def test_algorithm_outside_allow_list_is_rejected():
    raw = assemble({"alg": "HS512", "typ": "JWT"}, {"sub": "user-42"})
    with pytest.raises(AlgorithmError) as exc:
        JwtFactory().validator(raw, SECRET).algorithm_not_none()
    assert exc.value.code == 12


def test_additional_algorithms_extend_allow_list():
    raw = assemble({"alg": "HS512", "typ": "JWT"}, {"sub": "user-42"})
    validator = JwtFactory().validator(raw, SECRET)
    with pytest.raises(AlgorithmError):
        validator.algorithm()
    validator.algorithm(additional=["HS512"])
    JwtFactory(additional_algorithms=["HS512"]).validator(raw, SECRET).algorithm()


def test_algorithm_not_none_only_accepts_the_signing_algorithm():
    raw = assemble({"alg": "HS512", "typ": "JWT"}, {"sub": "user-42"})
    validator = JwtFactory(additional_algorithms=["HS512"]).validator(raw, SECRET)
    with pytest.raises(AlgorithmError) as exc:
        validator.algorithm_not_none()
    assert exc.value.code == 12
    assert JwtFactory(additional_algorithms=["HS512"]).validate(raw, SECRET) is False


def test_missing_algorithm_propagates_missing_claim():
    raw = assemble({"typ": "JWT"}, {"sub": "user-42"})
    with pytest.raises(MissingClaimError):
        JwtFactory().validator(raw, SECRET).algorithm_not_none()


def test_signature_rejects_wrong_secret():
    with pytest.raises(SignatureError) as exc:
        JwtFactory().validator(issued_token(sub="user-42"), "Abcdefgh124!").signature()
    assert exc.value.code == 3


def test_signature_rejects_tampered_payload():
    header, _, signature = issued_token(sub="user-42").split(".")
    forged_payload = Codec().encode_segment({"sub": "admin"})
    with pytest.raises(SignatureError):
        JwtFactory().validator(f"{header}.{forged_payload}.{signature}", SECRET).signature()


def test_signature_is_checked_over_raw_segments():
    # Same claims, different key order: a re-encoding check would accept this.
    header = Codec().encode_segment({"alg": "HS256", "typ": "JWT"})
    payload = Codec().encode_segment({"a": 1, "b": 2})
    signature = HS256Signer().sign(header, payload, SECRET)
    reordered = "eyJiIjoyLCJhIjoxfQ"  # {"b":2,"a":1}
    assert Codec().decode_segment(reordered) == {"a": 1, "b": 2}
    with pytest.raises(SignatureError):
        JwtFactory().validator(f"{header}.{reordered}.{signature}", SECRET).signature()


def test_expiration_gate():
    now = int(time.time())
    raw = issued_token(exp=now + 100)
    JwtFactory().validator(raw, SECRET).expiration(now)
    with pytest.raises(ExpiredClaimError) as exc:
        JwtFactory().validator(raw, SECRET).expiration(now + 100)
    assert exc.value.code == 4


def test_expiration_gate_requires_claim():
    with pytest.raises(MissingClaimError):
        JwtFactory().validator(issued_token(sub="user-42"), SECRET).expiration()


def test_not_before_gate():
    raw = issued_token(nbf=1_000)
    JwtFactory().validator(raw, SECRET).not_before(1_000)
    with pytest.raises(NotBeforeError) as exc:
        JwtFactory().validator(raw, SECRET).not_before(999)
    assert exc.value.code == 5


def test_audience_gate_with_string_and_list():
    JwtFactory().validator(issued_token(aud="api"), SECRET).audience("api")
    JwtFactory().validator(issued_token(aud=["web", "api"]), SECRET).audience("api")
    with pytest.raises(AudienceMismatchError) as exc:
        JwtFactory().validator(issued_token(aud=["web"]), SECRET).audience("api")
    assert exc.value.code == 2


def test_claim_rules_predicates():
    rules = ClaimRules()
    assert rules.expiration(11, now=10) is True
    assert rules.expiration(10, now=10) is False
    assert rules.not_before(10, now=10) is True
    assert rules.signature("abc", "abc") is True
    assert rules.signature("abc", "abd") is False
    assert rules.audience(42, "api") is False
    assert rules.algorithm("HS256", ["HS256"]) is True
