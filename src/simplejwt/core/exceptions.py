class JwtError(ValueError):
    """Base class for every token failure; ``code`` identifies the failure kind."""

    code = 0

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class BuilderError(JwtError):
    """Raised while assembling a token."""


class ParseError(JwtError):
    """Raised while splitting or decoding a token."""


class TokenValidationError(JwtError):
    """Raised by a validation gate."""


class WeakSecretError(BuilderError):
    code = 9


class InvalidAudienceError(BuilderError):
    code = 10


class InvalidPayloadClaimError(BuilderError):
    code = 8


class ExpiredClaimError(BuilderError, TokenValidationError):
    code = 4


class InvalidTimestampClaimError(BuilderError):
    code = 17


class DecodingError(ParseError):
    code = 15


class EncodingError(JwtError):
    code = 16


class MissingClaimError(ParseError):
    """Raised by strict accessors; ``claim`` names the absent key."""

    def __init__(self, message: str, code: int, claim: str) -> None:
        super().__init__(message, code)
        self.claim = claim


class StructureError(TokenValidationError):
    code = 1


class AudienceMismatchError(TokenValidationError):
    code = 2


class SignatureError(TokenValidationError):
    code = 3


class NotBeforeError(TokenValidationError):
    code = 5


class AlgorithmError(TokenValidationError):
    code = 12
