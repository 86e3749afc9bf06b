from ._claim_set import RESERVED_CLAIMS, ClaimKind, ClaimSet, DecodedClaims, StandardClaim
from ._outcome import Outcome

__all__ = [
    "RESERVED_CLAIMS",
    "ClaimKind",
    "ClaimSet",
    "DecodedClaims",
    "Outcome",
    "StandardClaim",
]
