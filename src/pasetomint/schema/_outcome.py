from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Outcome:
    """Either a payload string (token or claims JSON) or an error message."""

    success: bool
    output: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, output: str) -> Outcome:
        return cls(success=True, output=output)

    @classmethod
    def fail(cls, error: str) -> Outcome:
        return cls(success=False, error=error)
