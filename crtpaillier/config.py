"""
Runtime configuration for key generation.
Values come from the environment; parameters are validated with pydantic.
"""

import os

from pydantic import BaseModel, Field


# ── Configuration ──────────────────────────────────
DEFAULT_KEY_BITS = int(os.getenv("PAILLIER_KEY_BITS", "2048"))
# Moduli of 32 bits or less are unreliable; refuse them outright.
MIN_KEY_BITS = int(os.getenv("PAILLIER_MIN_KEY_BITS", "64"))
MILLER_RABIN_ROUNDS = int(os.getenv("PAILLIER_MR_ROUNDS", "40"))


# ── Models ─────────────────────────────────────────
class KeyGenParams(BaseModel):
    bits: int = Field(default=DEFAULT_KEY_BITS, ge=MIN_KEY_BITS, multiple_of=2)

    @property
    def prime_bits(self) -> int:
        return self.bits // 2
