"""Error kinds raised by the Paillier routines."""

import enum


class ErrorKind(enum.Enum):
    RANDOMNESS_FAILURE = "randomness_failure"
    MESSAGE_TOO_LARGE = "message_too_large"
    CIPHERTEXT_TOO_LARGE = "ciphertext_too_large"


class PaillierError(Exception):
    """Base class; ``kind`` tells which of the closed set of failures occurred."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(f"paillier: {message}")


class RandomnessFailure(PaillierError):
    kind = ErrorKind.RANDOMNESS_FAILURE


class MessageTooLarge(PaillierError, ValueError):
    kind = ErrorKind.MESSAGE_TOO_LARGE


class CiphertextTooLarge(PaillierError, ValueError):
    kind = ErrorKind.CIPHERTEXT_TOO_LARGE
