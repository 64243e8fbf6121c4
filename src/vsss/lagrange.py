"""Lagrange interpolation at x = 0 over a prime field."""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .arith import mod_inverse

_logger = logging.getLogger(__name__)


def interpolate_at_zero(points: Sequence[Tuple[int, int]], modulus: int) -> Optional[int]:
    """Return ``P(0) mod modulus`` for the polynomial through ``points``.

    Returns ``None`` when a denominator has no inverse, which happens for
    duplicate x-coordinates or a modulus sharing a factor with a denominator.
    With fewer points than the sharing threshold the result is a different,
    wrong value; callers must supply enough distinct shares.
    """

    total = 0
    for i, (xi, yi) in enumerate(points):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            num = (num * -xj) % modulus
            den = (den * (xi - xj)) % modulus
        inverse = mod_inverse(den, modulus)
        if inverse is None:
            _logger.debug("Denominator for x=%d is not invertible modulo the field", xi)
            return None
        total = (total + yi * num * inverse) % modulus
    return total


__all__ = ["interpolate_at_zero"]
