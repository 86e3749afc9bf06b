from pasetomint.config import ClaimFields
from pasetomint.managers import KeyManager
from pasetomint.schema import ClaimSet, Outcome
from pasetomint.services import TokenMint, assemble_claims

__all__ = ["ClaimFields", "ClaimSet", "KeyManager", "Outcome", "TokenMint", "assemble_claims"]
