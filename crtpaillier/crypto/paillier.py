from typing import Optional, Tuple

from crtpaillier.crypto.keys import L, PrivateKey, PublicKey
from crtpaillier.crypto.random_source import RandomSource, default_source
from crtpaillier.encoding import IntLike, as_int
from crtpaillier.errors import CiphertextTooLarge, MessageTooLarge


def encrypt(pub: PublicKey, m: IntLike, source: Optional[RandomSource] = None) -> int:
    c, _ = encrypt_and_nonce(pub, m, source)
    return c


def encrypt_and_nonce(
    pub: PublicKey, m: IntLike, source: Optional[RandomSource] = None
) -> Tuple[int, int]:
    """Encrypt ``m`` and also return the nonce, for proofs of correct encryption."""
    r = (source or default_source).randbelow(pub.n)
    return encrypt_with_nonce(pub, r, m), r


def encrypt_with_nonce(pub: PublicKey, r: IntLike, m: IntLike) -> int:
    m = as_int(m)
    r = as_int(r)
    if m >= pub.n:
        raise MessageTooLarge("message too long for Paillier public key size")
    # g^m == 1 + m*n (mod n^2) since g = n + 1
    g_m = (1 + m * pub.n) % pub.n_sq
    return (g_m * pow(r, pub.n, pub.n_sq)) % pub.n_sq


def _check_ciphertext(priv: PrivateKey, c: IntLike) -> int:
    c = as_int(c)
    if c >= priv.n_sq:
        raise CiphertextTooLarge("ciphertext too large for Paillier private key size")
    return c


def decrypt(priv: PrivateKey, c: IntLike) -> int:
    c = _check_ciphertext(priv, c)

    cp = pow(c, priv.p_minus_1, priv.p_sq)
    mp = (L(cp, priv.p) * priv.hp) % priv.p

    cq = pow(c, priv.q_minus_1, priv.q_sq)
    mq = (L(cq, priv.q) * priv.hq) % priv.q

    # Garner recombination of (mp mod p, mq mod q)
    u = ((mq - mp) * priv.p_inv_q) % priv.q
    return (mp + u * priv.p) % priv.n


def decrypt_full(priv: PrivateKey, c: IntLike) -> int:
    """Textbook decryption modulo n^2; slower, kept to cross-check :func:`decrypt`."""
    c = _check_ciphertext(priv, c)
    return (L(pow(c, priv.lam, priv.n_sq), priv.n) * priv.mu) % priv.n
