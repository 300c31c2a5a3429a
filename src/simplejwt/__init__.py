"""Issue and verify HMAC-SHA256 signed JSON Web Tokens."""

import logging

from simplejwt.core.codec import Codec
from simplejwt.core.exceptions import JwtError
from simplejwt.core.signer import HS256Signer
from simplejwt.models.token import ParsedToken, Token
from simplejwt.services.builder import JwtBuilder
from simplejwt.services.factory import JwtFactory, generate, get_payload, validate
from simplejwt.services.parser import JwtParser
from simplejwt.services.validator import JwtValidator

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Codec",
    "HS256Signer",
    "JwtBuilder",
    "JwtError",
    "JwtFactory",
    "JwtParser",
    "JwtValidator",
    "ParsedToken",
    "Token",
    "generate",
    "get_payload",
    "validate",
]
