from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Iterable

import pyseto
from pyseto import KeyInterface, PysetoError

from pasetomint.exceptions import (
    ClaimMismatchError,
    MissingClaimError,
    TimeExpressionError,
    TokenAuthenticationError,
    TokenCodecError,
    TokenExpiredError,
    TokenNotYetValidError,
)
from pasetomint.parsers import parse_timestamp
from pasetomint.schema import RESERVED_CLAIMS, DecodedClaims

logger = logging.getLogger(__name__)

TOKEN_HEADER = "v4.local."


class LocalTokenCodec:
    """
    PASETO v4.local encryption of a flat, string-valued claim object.

    Expiration and not-before are enforced against the token's own
    values unless the caller constrains that claim explicitly, in which
    case exact equality replaces the time window check.
    """

    def encode(
        self,
        key: KeyInterface,
        registered: Iterable[tuple[str, str]],
        custom: Iterable[tuple[str, str]] = (),
    ) -> str:
        """
        Encrypt registered and custom claims into a token.

        Registered claims must use a reserved name and custom claims must not.
        """
        payload: dict[str, str] = {}
        for name, value in registered:
            if name not in RESERVED_CLAIMS:
                raise TokenCodecError(f"'{name}' is not a registered PASETO claim")
            payload[name] = value

        for name, value in custom:
            if not name:
                raise TokenCodecError("Custom claim keys must not be empty")
            if name in RESERVED_CLAIMS:
                raise TokenCodecError(
                    f"The key '{name}' is reserved for use within PASETO. "
                    "To set a reserved claim, use its dedicated field"
                )
            payload[name] = value

        try:
            token = pyseto.encode(key, json.dumps(payload).encode("utf-8"))
        except (PysetoError, ValueError) as error:
            raise TokenCodecError(f"Failed to encrypt token: {error}") from error
        return token.decode("ascii")

    def decode(
        self,
        key: KeyInterface,
        token: str,
        constraints: Iterable[tuple[str, str]],
        now: datetime,
    ) -> DecodedClaims:
        """
        Authenticate and decrypt ``token``, then check every constraint.

        Returns the full claim object; raises a ``TokenCodecError``
        subclass on any failure and never returns unauthenticated claims.
        """
        if not token.startswith(TOKEN_HEADER):
            raise TokenCodecError(f"Invalid token header: expected a '{TOKEN_HEADER}' token")

        try:
            decoded = pyseto.decode(key, token)
        except PysetoError as error:
            raise TokenAuthenticationError(
                "Token authentication failed: the key is wrong or the token was tampered with"
            ) from error
        except ValueError as error:
            raise TokenCodecError(f"Malformed token: {error}") from error

        try:
            claims: Any = json.loads(decoded.payload)
        except ValueError as error:
            raise TokenCodecError("Token payload is not valid JSON") from error
        if not isinstance(claims, dict):
            raise TokenCodecError("Token payload is not a JSON object")

        constrained: set[str] = set()
        for name, expected in constraints:
            constrained.add(name)
            if name not in claims:
                raise MissingClaimError(name)
            if claims[name] != expected:
                raise ClaimMismatchError(name)

        if "exp" not in constrained and "exp" in claims:
            if self._instant(claims, "exp") <= now:
                raise TokenExpiredError(f"This token is expired (exp: {claims['exp']})")

        if "nbf" not in constrained and "nbf" in claims:
            if self._instant(claims, "nbf") > now:
                raise TokenNotYetValidError(
                    f"This token is not valid yet (nbf: {claims['nbf']})"
                )

        logger.debug("Decoded token with claims: %s", ", ".join(claims))
        return claims

    @staticmethod
    def _instant(claims: DecodedClaims, name: str) -> datetime:
        value = claims[name]
        if not isinstance(value, str):
            raise TokenCodecError(f"The claim '{name}' is not an RFC 3339 timestamp")
        try:
            return parse_timestamp(value)
        except TimeExpressionError as error:
            raise TokenCodecError(f"The claim '{name}' is not an RFC 3339 timestamp: {error}") from error
