from __future__ import annotations

_FORMAT_HINT = "expected format KEY=value"


class PasetoMintError(Exception):
    """Base class for every error raised by pasetomint."""


class SettingsError(PasetoMintError):
    """Raised when an environment setting holds an unsupported value."""


class KeyMaterialError(PasetoMintError):
    """Raised when the supplied symmetric key cannot be used."""


class TimeExpressionError(PasetoMintError):
    """Base class for time expression parsing failures."""


class InvalidDurationError(TimeExpressionError):
    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(f"Invalid relative time '{expression}': expected [-]N followed by s, m, h or d")


class InvalidTimestampError(TimeExpressionError):
    def __init__(self, expression: str, detail: str) -> None:
        self.expression = expression
        self.detail = detail
        super().__init__(f"Invalid timestamp '{expression}': {detail}")


class ClaimAssemblyError(PasetoMintError):
    """Base class for errors found while building a claim set."""


class MissingKeyError(ClaimAssemblyError):
    def __init__(self) -> None:
        super().__init__(f"Missing key: {_FORMAT_HINT}")


class MissingValueError(ClaimAssemblyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing value for key '{key}': {_FORMAT_HINT}")


class MalformedPairError(ClaimAssemblyError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid format '{raw}': {_FORMAT_HINT}")


class ReservedClaimError(ClaimAssemblyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"The key '{key}' is reserved for a standard claim. "
            "Use the dedicated option to set it instead of a custom claim."
        )


class TemporalClaimError(ClaimAssemblyError):
    """Wraps a time expression failure with the claim field it belongs to."""

    def __init__(self, field: str, cause: TimeExpressionError) -> None:
        self.field = field
        self.cause = cause
        super().__init__(
            f"Invalid {field} format. Use ISO 8601 (e.g., '2024-07-23T00:20:32Z') "
            f"or relative time (e.g., '5m', '-1h', '2d'): {cause}"
        )


class TokenCodecError(PasetoMintError):
    """Raised by the token codec; the message is reported to the caller verbatim."""


class TokenAuthenticationError(TokenCodecError):
    pass


class TokenExpiredError(TokenCodecError):
    pass


class TokenNotYetValidError(TokenCodecError):
    pass


class ClaimMismatchError(TokenCodecError):
    def __init__(self, claim: str, message: str | None = None) -> None:
        self.claim = claim
        super().__init__(message or f"The claim '{claim}' failed validation")


class MissingClaimError(ClaimMismatchError):
    def __init__(self, claim: str) -> None:
        super().__init__(claim, f"The expected claim '{claim}' was not found in the token")
