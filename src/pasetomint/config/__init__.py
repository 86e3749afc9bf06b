from ._claim_fields import ClaimFields

__all__ = ["ClaimFields"]
