"""
Unsigned big-endian encoding of key fields, plaintexts, ciphertexts and nonces.
Widths are not fixed; callers framing values must derive them from the key.
"""

from typing import TYPE_CHECKING, Union

from crtpaillier.errors import CiphertextTooLarge

if TYPE_CHECKING:
    from crtpaillier.crypto.keys import PublicKey

IntLike = Union[int, bytes, bytearray]


def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "big")


def int_to_bytes(value: int, length: int | None = None) -> bytes:
    """Encode ``value`` big-endian; zero encodes to ``b""`` unless a length is given."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if length is None:
        length = (value.bit_length() + 7) // 8
    return value.to_bytes(length, "big")


def as_int(value: IntLike) -> int:
    if isinstance(value, (bytes, bytearray)):
        return bytes_to_int(bytes(value))
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int or bytes, got {type(value).__name__}")
    if value < 0:
        raise ValueError("value must be non-negative")
    return value


def ciphertext_to_bytes(pub: "PublicKey", c: int) -> bytes:
    """Fixed-width encoding of a ciphertext, sized from ``n_sq``."""
    if c >= pub.n_sq:
        raise CiphertextTooLarge("ciphertext too large for Paillier public key size")
    return int_to_bytes(c, pub.ciphertext_length)
