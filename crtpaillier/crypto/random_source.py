import logging
import math
import secrets
from typing import Protocol

from crtpaillier.config import MILLER_RABIN_ROUNDS
from crtpaillier.errors import RandomnessFailure

logger = logging.getLogger(__name__)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71)
# One gcd against this product rules out every candidate with a small factor.
SIEVE_PRODUCT = math.prod(SMALL_PRIMES)


class RandomSource(Protocol):
    """Cryptographically secure supplier of bounded integers and primes."""

    def randbelow(self, bound: int) -> int:
        ...

    def prime(self, bits: int) -> int:
        ...


def miller_rabin(n: int, rounds: int = MILLER_RABIN_ROUNDS) -> bool:
    """Miller-Rabin test for an odd n > 3 with random witnesses."""
    n_minus_1 = n - 1
    s = (n_minus_1 & -n_minus_1).bit_length() - 1
    d = n_minus_1 >> s
    for _ in range(rounds):
        x = pow(secrets.randbelow(n - 3) + 2, d, n)
        if x in (1, n_minus_1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n_minus_1:
                break
        else:
            return False
    return True


def is_probable_prime(n: int, rounds: int = MILLER_RABIN_ROUNDS) -> bool:
    if n < 2:
        return False
    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p
    return miller_rabin(n, rounds)


class SystemRandomSource:
    """Default source backed by the OS CSPRNG through :mod:`secrets`."""

    def randbelow(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError("bound must be positive")
        try:
            return secrets.randbelow(bound)
        except OSError as exc:
            raise RandomnessFailure("entropy source unavailable") from exc

    def _candidate(self, bits: int) -> int:
        top = (1 << (bits - 1)) | (1 << (bits - 2))
        try:
            return secrets.randbits(bits) | top | 1
        except OSError as exc:
            raise RandomnessFailure("entropy source unavailable") from exc

    def prime(self, bits: int) -> int:
        """Random prime of exactly ``bits`` bits with the two top bits set."""
        if bits < 8:
            raise ValueError("prime size must be at least 8 bits")
        attempts = 0
        while True:
            attempts += 1
            candidate = self._candidate(bits)
            if math.gcd(candidate, SIEVE_PRODUCT) != 1:
                continue
            if miller_rabin(candidate):
                logger.debug("found %d-bit prime after %d candidates", bits, attempts)
                return candidate


default_source = SystemRandomSource()
