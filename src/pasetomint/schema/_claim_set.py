from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from pasetomint.exceptions import ReservedClaimError
from pasetomint.parsers import format_instant

DecodedClaims = dict[str, Any]


class ClaimKind(Enum):
    """The registered PASETO claims, valued by their wire name."""

    SUBJECT = "sub"
    ISSUER = "iss"
    AUDIENCE = "aud"
    TOKEN_ID = "jti"
    ISSUED_AT = "iat"
    NOT_BEFORE = "nbf"
    EXPIRATION = "exp"

    @property
    def is_temporal(self) -> bool:
        return self in _TEMPORAL_KINDS


_TEMPORAL_KINDS = frozenset({ClaimKind.ISSUED_AT, ClaimKind.NOT_BEFORE, ClaimKind.EXPIRATION})

RESERVED_CLAIMS: frozenset[str] = frozenset(kind.value for kind in ClaimKind)


@dataclass(frozen=True)
class StandardClaim:
    """One registered claim with its typed payload."""

    kind: ClaimKind
    value: str | datetime

    def serialize(self) -> str:
        if isinstance(self.value, datetime):
            return format_instant(self.value)
        return self.value


@dataclass(frozen=True)
class ClaimSet:
    """
    The claims handed to a single generate or validate operation.

    String claims are kept verbatim and temporal claims as resolved UTC
    instants. ``custom`` keeps insertion order and may not reuse a
    registered claim name.

    Example:
    ```
        claims = ClaimSet(
            subject="user123",
            expiration=datetime(2030, 1, 1, tzinfo=timezone.utc),
            custom={"role": "admin"},
        )
    ```
    """

    subject: str | None = None
    issuer: str | None = None
    audience: str | None = None
    token_id: str | None = None
    issued_at: datetime | None = None
    not_before: datetime | None = None
    expiration: datetime | None = None
    custom: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key in self.custom:
            if key in RESERVED_CLAIMS:
                raise ReservedClaimError(key)
        # Read-only private copy; neither the caller's dict nor later writes can change it.
        object.__setattr__(self, "custom", MappingProxyType(dict(self.custom)))

    def standard_claims(self) -> list[StandardClaim]:
        values: dict[ClaimKind, str | datetime | None] = {
            ClaimKind.SUBJECT: self.subject,
            ClaimKind.ISSUER: self.issuer,
            ClaimKind.AUDIENCE: self.audience,
            ClaimKind.TOKEN_ID: self.token_id,
            ClaimKind.ISSUED_AT: self.issued_at,
            ClaimKind.NOT_BEFORE: self.not_before,
            ClaimKind.EXPIRATION: self.expiration,
        }
        return [StandardClaim(kind, value) for kind, value in values.items() if value is not None]

    def registered_claims(self) -> Iterator[tuple[str, str]]:
        for claim in self.standard_claims():
            yield claim.kind.value, claim.serialize()

    def claims(self) -> Iterator[tuple[str, str]]:
        """Yield every populated claim as a ``(wire name, string value)`` pair."""
        yield from self.registered_claims()
        yield from self.custom.items()

    def is_empty(self) -> bool:
        return not self.standard_claims() and not self.custom
