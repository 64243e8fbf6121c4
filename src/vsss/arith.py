"""Modular arithmetic over arbitrary-precision integers."""
from __future__ import annotations

from typing import Optional, Tuple


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` by binary exponentiation.

    ``modulus`` must be positive; ``pow`` raises ``ValueError`` for zero.
    """

    return pow(base, exponent, modulus)


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a*x + b*y == g``.

    ``extended_gcd(0, b)`` is ``(b, 0, 1)``. The loop mirrors the recursive
    definition step for step, so results are identical without recursion depth
    growing with the operand size.
    """

    quotients = []
    # egcd(a, b) descends into egcd(b % a, a) until a == 0
    while a != 0:
        quotients.append(b // a)
        a, b = b % a, a
    x, y = 0, 1
    for quotient in reversed(quotients):
        x, y = y - quotient * x, x
    return b, x, y


def mod_inverse(a: int, m: int) -> Optional[int]:
    """Return ``a ** -1 mod m``, or ``None`` when ``gcd(a, m) != 1``."""

    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        return None
    return x % m


__all__ = ["extended_gcd", "mod_exp", "mod_inverse"]
