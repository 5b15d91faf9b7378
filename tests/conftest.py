"""Shared pytest fixtures for the Paillier test suite."""

import threading

import pytest

from crtpaillier.crypto.keys import generate_keypair
from crtpaillier.errors import RandomnessFailure


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="session")
def keypair_128():
    """A small key, enough for the worked arithmetic examples."""
    return generate_keypair(bits=128)


@pytest.fixture(scope="session")
def keypair_256():
    return generate_keypair(bits=256)


class FixedPrimeSource:
    """Random source replaying a scripted sequence of primes."""

    def __init__(self, primes, nonce=1):
        self._primes = list(primes)
        self._nonce = nonce
        self.threads = []

    @property
    def calls(self):
        return len(self.threads)

    def randbelow(self, bound):
        return self._nonce % bound

    def prime(self, bits):
        self.threads.append(threading.get_ident())
        return self._primes.pop(0)


class FailingSource:
    """Random source whose entropy is always unavailable."""

    def randbelow(self, bound):
        raise RandomnessFailure("no entropy")

    def prime(self, bits):
        raise RandomnessFailure("no entropy")


@pytest.fixture()
def fixed_prime_source():
    return FixedPrimeSource


@pytest.fixture()
def failing_source():
    return FailingSource()
