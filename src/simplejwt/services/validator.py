from __future__ import annotations

from typing import Iterable

from simplejwt.core.exceptions import (
    AlgorithmError,
    AudienceMismatchError,
    ExpiredClaimError,
    NotBeforeError,
    SignatureError,
    StructureError,
)
from simplejwt.core.signer import Signer
from simplejwt.services.claim_rules import ClaimRulesProtocol
from simplejwt.services.parser import JwtParser


class JwtValidator:
    """Chainable gate checks over a parsed token.

    Each check raises on the first failure and otherwise returns the validator,
    so ``validator.structure().algorithm_not_none().signature()`` reads left to right.
    """

    def __init__(
        self,
        parser: JwtParser,
        signer: Signer,
        claim_rules: ClaimRulesProtocol,
        additional_algorithms: Iterable[str] = (),
    ) -> None:
        self._parser = parser
        self._signer = signer
        self._claim_rules = claim_rules
        self._additional_algorithms = tuple(additional_algorithms)

    def allowed_algorithms(self, additional: Iterable[str] = ()) -> set[str]:
        return {self._signer.algorithm_name(), *self._additional_algorithms, *additional}

    def signing_algorithm(self) -> str:
        return self._signer.algorithm_name()

    def structure(self) -> JwtValidator:
        if not self._claim_rules.structure(self._parser.get_token()):
            raise StructureError("Token is invalid.")
        return self

    def algorithm_not_none(self) -> JwtValidator:
        algorithm = self._parser.get_algorithm()
        if algorithm.lower() == "none":
            raise AlgorithmError("Algorithm claim should not be none.", 14)
        # Extra allow-listed names apply to algorithm() only.
        if not self._claim_rules.algorithm(algorithm, [self.signing_algorithm()]):
            raise AlgorithmError("Algorithm claim is not valid.")
        return self

    def algorithm(self, additional: Iterable[str] = ()) -> JwtValidator:
        if not self._claim_rules.algorithm(self._parser.get_algorithm(), self.allowed_algorithms(additional)):
            raise AlgorithmError("Algorithm claim is not valid.")
        return self

    def signature(self) -> JwtValidator:
        header_segment, payload_segment, provided = self._parser.split_segments()
        generated = self._signer.sign(header_segment, payload_segment, self._parser.get_secret())
        if not self._claim_rules.signature(generated, provided):
            raise SignatureError("Signature is invalid.")
        return self

    def expiration(self, now: int | None = None) -> JwtValidator:
        if not self._claim_rules.expiration(self._parser.get_expiration(), now):
            raise ExpiredClaimError("Expiration claim has expired.")
        return self

    def not_before(self, now: int | None = None) -> JwtValidator:
        if not self._claim_rules.not_before(self._parser.get_not_before(), now):
            raise NotBeforeError("Not Before claim has not elapsed.")
        return self

    def audience(self, check: str) -> JwtValidator:
        if not self._claim_rules.audience(self._parser.get_audience(), check):
            raise AudienceMismatchError("Audience claim does not contain provided StringOrURI.")
        return self
