from simplejwt.core.codec import Codec
from simplejwt.core.config import Settings, get_settings
from simplejwt.core.exceptions import (
    AlgorithmError,
    AudienceMismatchError,
    BuilderError,
    DecodingError,
    EncodingError,
    ExpiredClaimError,
    InvalidAudienceError,
    InvalidPayloadClaimError,
    InvalidTimestampClaimError,
    JwtError,
    MissingClaimError,
    NotBeforeError,
    ParseError,
    SignatureError,
    StructureError,
    TokenValidationError,
    WeakSecretError,
)
from simplejwt.core.logging import configure_logging
from simplejwt.core.signer import HS256Signer, Signer

__all__ = [
    "Codec",
    "HS256Signer",
    "Signer",
    "Settings",
    "get_settings",
    "configure_logging",
    "JwtError",
    "BuilderError",
    "ParseError",
    "TokenValidationError",
    "WeakSecretError",
    "InvalidAudienceError",
    "InvalidPayloadClaimError",
    "InvalidTimestampClaimError",
    "ExpiredClaimError",
    "DecodingError",
    "EncodingError",
    "MissingClaimError",
    "StructureError",
    "AudienceMismatchError",
    "SignatureError",
    "NotBeforeError",
    "AlgorithmError",
]
