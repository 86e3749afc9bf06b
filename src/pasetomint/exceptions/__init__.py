from ._errors import (
    ClaimAssemblyError,
    ClaimMismatchError,
    InvalidDurationError,
    InvalidTimestampError,
    KeyMaterialError,
    MalformedPairError,
    MissingClaimError,
    MissingKeyError,
    MissingValueError,
    PasetoMintError,
    ReservedClaimError,
    SettingsError,
    TemporalClaimError,
    TimeExpressionError,
    TokenAuthenticationError,
    TokenCodecError,
    TokenExpiredError,
    TokenNotYetValidError,
)

__all__ = [
    "ClaimAssemblyError",
    "ClaimMismatchError",
    "InvalidDurationError",
    "InvalidTimestampError",
    "KeyMaterialError",
    "MalformedPairError",
    "MissingClaimError",
    "MissingKeyError",
    "MissingValueError",
    "PasetoMintError",
    "ReservedClaimError",
    "SettingsError",
    "TemporalClaimError",
    "TimeExpressionError",
    "TokenAuthenticationError",
    "TokenCodecError",
    "TokenExpiredError",
    "TokenNotYetValidError",
]
