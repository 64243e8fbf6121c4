"""Random integers and probable primes for the sharing engines.

Every engine accepts an ``rng`` argument: any object with a
``randrange(start, stop)`` method. The default is :class:`secrets.SystemRandom`;
tests pass a seeded :class:`random.Random` to get reproducible dealings.
"""
from __future__ import annotations

import logging
import secrets
from typing import Optional, Protocol

import sympy

from .validation import ValidationIssue, require_valid

_logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


system_random: RandomSource = secrets.SystemRandom()


def _resolve(rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else system_random


def random_integer(upper: int, *, rng: Optional[RandomSource] = None) -> int:
    """Return a uniformly random integer in ``[1, upper)``."""

    if upper <= 1:
        require_valid([ValidationIssue("upper", "range [1, upper) is empty")])
    return _resolve(rng).randrange(1, upper)


def generate_prime(bits: int, *, rng: Optional[RandomSource] = None) -> int:
    """Return a probable prime of exactly ``bits`` bits."""

    if bits < 2:
        require_valid([ValidationIssue("bits", "a prime needs at least 2 bits")])
    source = _resolve(rng)
    low, high = 1 << (bits - 1), 1 << bits
    attempts = 0
    while True:
        attempts += 1
        candidate = int(sympy.nextprime(source.randrange(low, high) - 1))
        if candidate < high:
            _logger.debug("Generated %d-bit prime after %d attempt(s)", bits, attempts)
            return candidate


__all__ = ["RandomSource", "generate_prime", "random_integer", "system_random"]
