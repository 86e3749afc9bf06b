import json
import logging
from datetime import datetime, timezone

from pasetomint.codec import LocalTokenCodec
from pasetomint.exceptions import TokenCodecError
from pasetomint.managers import KeyManager
from pasetomint.schema import ClaimSet, DecodedClaims

logger = logging.getLogger(__name__)


class TokenMint:
    """
    High-level API to generate and validate PASETO v4.local tokens from a claim set.
    """

    def __init__(
        self,
        key_manager: KeyManager,
        codec: LocalTokenCodec | None = None,
    ) -> None:
        self.key_manager = key_manager
        self.codec = codec or LocalTokenCodec()

    @staticmethod
    def _current_time() -> datetime:
        return datetime.now(timezone.utc)

    def generate_token(self, claims: ClaimSet) -> str:
        """Encrypt every populated claim of ``claims`` into a new token."""
        token = self.codec.encode(
            self.key_manager.paseto_key,
            registered=claims.registered_claims(),
            custom=claims.custom.items(),
        )
        logger.debug("Generated token with claims: %s", ", ".join(name for name, _ in claims.claims()))
        return token

    def validate_token(
        self,
        token: str,
        expected: ClaimSet | None = None,
    ) -> DecodedClaims:
        """
        Authenticate the token and require every populated field of ``expected``
        to match the embedded claim exactly. Embedded expiration and not-before
        are enforced unless ``expected`` pins them.
        Returns the decoded claims if valid; raises TokenCodecError on failure.
        """
        constraints = list((expected or ClaimSet()).claims())
        try:
            claims = self.codec.decode(
                self.key_manager.paseto_key,
                token,
                constraints=constraints,
                now=self._current_time(),
            )
        except TokenCodecError as error:
            logger.warning("Token rejected: %s", error)
            raise

        return claims

    @staticmethod
    def render_claims(claims: DecodedClaims) -> str:
        """Pretty-print decoded claims as JSON for display."""
        return json.dumps(claims, indent=2, ensure_ascii=False)
