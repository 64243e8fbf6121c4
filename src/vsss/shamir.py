"""Shamir's Secret Sharing over a caller-supplied prime field.

``generate_shares``
    Split an integer secret into ``num_shares`` shares with a reconstruction
    threshold of ``threshold`` using a random polynomial.

``reconstruct_secret``
    Recover the secret from at least ``threshold`` distinct shares produced by
    :func:`generate_shares` with the same modulus.

The modulus must be prime and identical at both steps. A different modulus at
reconstruction, or fewer than ``threshold`` shares, yields a wrong secret
rather than an error.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Sequence, Tuple

from .audit import record_event
from .lagrange import interpolate_at_zero
from .polynomial import Polynomial
from .randomness import RandomSource
from .validation import (
    require_valid,
    validate_modulus,
    validate_secret,
    validate_shares,
    validate_sharing_parameters,
)

_logger = logging.getLogger(__name__)


class Share(NamedTuple):
    index: int
    value: int


def evaluate_shares(poly: Polynomial, num_shares: int, modulus: int) -> list[Share]:
    """Evaluate ``poly`` at ``x = 1..num_shares`` and reduce modulo ``modulus``."""

    return [Share(x, poly.evaluate(x) % modulus) for x in range(1, num_shares + 1)]


def generate_shares(
    secret: int,
    threshold: int,
    num_shares: int,
    modulus: int,
    *,
    max_bits: int | None = None,
    rng: Optional[RandomSource] = None,
) -> list[Share]:
    """Split ``secret`` into ``num_shares`` shares with threshold ``threshold``.

    Random coefficients are drawn below ``2**max_bits``, by default the bit
    length of ``modulus``.
    """

    require_valid(
        validate_sharing_parameters(threshold, num_shares),
        validate_modulus(modulus),
        validate_secret(secret, modulus) if modulus > 1 else [],
    )
    poly = Polynomial.for_secret(
        threshold - 1,
        max_bits if max_bits is not None else modulus.bit_length(),
        secret,
        rng=rng,
    )
    shares = evaluate_shares(poly, num_shares, modulus)
    _logger.debug("Generated %d shares with threshold %d", num_shares, threshold)
    record_event("shamir.split", details={"threshold": threshold, "num_shares": num_shares})
    return shares


def reconstruct_secret(shares: Sequence[Tuple[int, int]], modulus: int) -> Optional[int]:
    """Recover the secret from ``shares``, or ``None`` if interpolation fails."""

    require_valid(validate_shares(shares, modulus), validate_modulus(modulus))
    secret = interpolate_at_zero(shares, modulus)
    if secret is None:
        _logger.debug("Reconstruction from %d shares failed", len(shares))
        record_event(
            "reconstruct.failed",
            details={"indices": [index for index, _ in shares]},
        )
    return secret


__all__ = ["Share", "evaluate_shares", "generate_shares", "reconstruct_secret"]
