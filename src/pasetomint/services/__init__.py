from ._claim_assembler import assemble_claims
from ._token_mint import TokenMint

__all__ = ["TokenMint", "assemble_claims"]
