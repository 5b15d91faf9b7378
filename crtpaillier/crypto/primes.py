"""Concurrent search for the two secret primes of a key."""

import logging
from concurrent.futures import ThreadPoolExecutor

from crtpaillier.crypto.random_source import RandomSource

logger = logging.getLogger(__name__)


def generate_prime_pair(source: RandomSource, bits: int) -> tuple[int, int]:
    """
    Draw two distinct primes of ``bits // 2`` bits each.
    p is searched on a worker thread while q is searched here; p is redrawn
    until it differs from q. Any failure from the source is raised as is; a
    worker draw already in progress at that point cannot be interrupted and
    keeps its thread alive until it returns, which also delays interpreter exit.
    """
    half = bits // 2
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="paillier-prime")
    try:
        background = executor.submit(source.prime, half)
        q = source.prime(half)
        p = background.result()
        while p == q:
            logger.warning("prime collision during key generation, redrawing")
            p = executor.submit(source.prime, half).result()
    finally:
        # A failed draw on this thread must not wait for the worker.
        executor.shutdown(wait=False, cancel_futures=True)
    logger.debug("generated two distinct %d-bit primes", half)
    return p, q
