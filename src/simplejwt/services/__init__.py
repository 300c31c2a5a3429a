from simplejwt.services.auth_service import AuthService, AuthUser, TokenRejectedError
from simplejwt.services.builder import JwtBuilder
from simplejwt.services.claim_rules import ClaimRules
from simplejwt.services.factory import JwtFactory, generate, get_payload, validate
from simplejwt.services.parser import JwtParser
from simplejwt.services.secret_validator import SecretValidator
from simplejwt.services.validator import JwtValidator

__all__ = [
    "AuthService",
    "AuthUser",
    "ClaimRules",
    "JwtBuilder",
    "JwtFactory",
    "JwtParser",
    "JwtValidator",
    "SecretValidator",
    "TokenRejectedError",
    "generate",
    "get_payload",
    "validate",
]
