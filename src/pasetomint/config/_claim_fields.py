from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClaimFields:
    """
    Raw standard claim values as supplied by a caller, before assembly.

    Attributes:
        subject (str | None): The principal the token is about.
        issuer (str | None): The entity that issues the token.
        audience (str | None): The intended recipient of the token.
        token_id (str | None): A unique identifier for the token.
        issued_at (str | None): Time expression for the issued-at claim.
        not_before (str | None): Time expression for the not-before claim.
        expiration (str | None): Time expression for the expiration claim.

    Time expressions are RFC 3339 timestamps or relative offsets such as
    ``"2h"``, ``"-30m"`` or ``"5d"``.

    Example:
    ```
        fields = ClaimFields(
            subject="user123",
            issuer="my-app",
            expiration="2h",
        )
    ```
    """

    subject: str | None = None
    issuer: str | None = None
    audience: str | None = None
    token_id: str | None = None
    issued_at: str | None = None
    not_before: str | None = None
    expiration: str | None = None
