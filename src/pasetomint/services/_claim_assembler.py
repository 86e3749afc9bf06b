from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from pasetomint.config import ClaimFields
from pasetomint.exceptions import ReservedClaimError, TemporalClaimError, TimeExpressionError
from pasetomint.parsers import parse_custom_claim, parse_time
from pasetomint.schema import RESERVED_CLAIMS, ClaimSet


def _resolve(field: str, expression: str | None, now: datetime) -> datetime | None:
    if expression is None:
        return None
    try:
        return parse_time(expression, now)
    except TimeExpressionError as error:
        raise TemporalClaimError(field, error) from error


def assemble_claims(
    fields: ClaimFields,
    custom_pairs: Iterable[str] = (),
    now: datetime | None = None,
) -> ClaimSet:
    """
    Turn raw caller input into a validated ``ClaimSet``.

    Temporal fields are resolved against ``now`` (current UTC time when
    omitted). Custom pairs are ``KEY=VALUE`` strings; a repeated key
    overwrites the earlier value but keeps its original position.
    """
    now = now or datetime.now(timezone.utc)

    custom: dict[str, str] = {}
    for raw in custom_pairs:
        key, value = parse_custom_claim(raw)
        if key in RESERVED_CLAIMS:
            raise ReservedClaimError(key)
        custom[key] = value

    return ClaimSet(
        subject=fields.subject,
        issuer=fields.issuer,
        audience=fields.audience,
        token_id=fields.token_id,
        issued_at=_resolve("issued_at", fields.issued_at, now),
        not_before=_resolve("not_before", fields.not_before, now),
        expiration=_resolve("expiration", fields.expiration, now),
        custom=custom,
    )
