import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from anyio import to_thread

from crtpaillier.config import DEFAULT_KEY_BITS, KeyGenParams
from crtpaillier.crypto.primes import generate_prime_pair
from crtpaillier.crypto.random_source import RandomSource, default_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicKey:
    n: int
    g: int
    n_sq: int

    @property
    def bits(self) -> int:
        return self.n.bit_length()

    @property
    def ciphertext_length(self) -> int:
        """Byte width needed to hold any ciphertext under this key."""
        return (self.n_sq.bit_length() + 7) // 8


@dataclass(frozen=True)
class PrivateKey(PublicKey):
    p: int = field(repr=False)
    q: int = field(repr=False)
    p_sq: int = field(repr=False)
    q_sq: int = field(repr=False)
    p_minus_1: int = field(repr=False)
    q_minus_1: int = field(repr=False)
    p_inv_q: int = field(repr=False)
    hp: int = field(repr=False)
    hq: int = field(repr=False)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(n=self.n, g=self.g, n_sq=self.n_sq)

    @property
    def lam(self) -> int:
        """Carmichael's lambda(n) = lcm(p - 1, q - 1)."""
        return math.lcm(self.p_minus_1, self.q_minus_1)

    @property
    def mu(self) -> int:
        return pow(L(pow(self.g, self.lam, self.n_sq), self.n), -1, self.n)


def L(u: int, n: int) -> int:
    return (u - 1) // n


def public_key_from_modulus(n: int) -> PublicKey:
    return PublicKey(n=n, g=n + 1, n_sq=n * n)


def _h(prime: int, prime_sq: int, n: int) -> int:
    # (1 - n) mod prime^2 == g^(prime - 1) mod prime^2 when g = n + 1
    gp = (1 - n) % prime_sq
    return pow(L(gp, prime), -1, prime)


def build_private_key(p: int, q: int) -> PrivateKey:
    """Derive the modulus and all CRT decryption material from two distinct primes."""
    if p == q:
        raise ValueError("p and q must be distinct primes")
    n = p * q
    p_sq = p * p
    q_sq = q * q
    return PrivateKey(
        n=n,
        g=n + 1,
        n_sq=n * n,
        p=p,
        q=q,
        p_sq=p_sq,
        q_sq=q_sq,
        p_minus_1=p - 1,
        q_minus_1=q - 1,
        p_inv_q=pow(p, -1, q),
        hp=_h(p, p_sq, n),
        hq=_h(q, q_sq, n),
    )


def generate_keypair(
    bits: int = DEFAULT_KEY_BITS, source: Optional[RandomSource] = None
) -> Tuple[PublicKey, PrivateKey]:
    params = KeyGenParams(bits=bits)
    p, q = generate_prime_pair(source or default_source, params.bits)
    priv = build_private_key(p, q)
    logger.info("generated %d-bit Paillier key pair", priv.bits)
    return priv.public_key, priv


async def generate_keypair_async(
    bits: int = DEFAULT_KEY_BITS, source: Optional[RandomSource] = None
) -> Tuple[PublicKey, PrivateKey]:
    """Run :func:`generate_keypair` on a worker thread so the event loop stays free."""
    return await to_thread.run_sync(generate_keypair, bits, source)
