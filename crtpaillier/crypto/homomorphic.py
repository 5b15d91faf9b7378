"""
Homomorphic operations on ciphertexts under a public key.

The constant ``k`` is used as given and never reduced mod n. For k >= n the
result is still a well-formed ciphertext, but what it decrypts to is no longer
plain ``m + k`` / ``m * k``: the plaintext ring wraps at n.
"""

from typing import Iterable

from crtpaillier.crypto.keys import PublicKey
from crtpaillier.encoding import IntLike, as_int


def add_cipher(pub: PublicKey, c1: IntLike, c2: IntLike) -> int:
    """Ciphertext of the sum of the two encrypted plaintexts."""
    return (as_int(c1) * as_int(c2)) % pub.n_sq


def add(pub: PublicKey, c: IntLike, k: IntLike) -> int:
    """Ciphertext of ``plaintext + k``."""
    return (as_int(c) * pow(pub.g, as_int(k), pub.n_sq)) % pub.n_sq


def mul(pub: PublicKey, c: IntLike, k: IntLike) -> int:
    """Ciphertext of ``plaintext * k``."""
    return pow(as_int(c), as_int(k), pub.n_sq)


def sum_ciphers(pub: PublicKey, ciphers: Iterable[IntLike]) -> int:
    total = 1
    for c in ciphers:
        total = add_cipher(pub, total, c)
    return total
