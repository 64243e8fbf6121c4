"""Feldman's Verifiable Secret Sharing.

Feldman VSS extends Shamir's scheme with public commitments ``g**c_k mod q``
to every coefficient of the sharing polynomial. Any shareholder can check its
share against the commitments without learning the secret, the coefficients or
the other shares:

    g**y mod q == prod(C_k ** (i**k mod q)) mod q

The group ``(g, q)`` is chosen by the caller. :meth:`FeldmanVSSParams.generate`
picks a random prime ``q`` which is good enough for demos and tests but is not
a vetted group setup.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Tuple

from .arith import mod_exp
from .audit import record_event
from .lagrange import interpolate_at_zero
from .policy import policy
from .polynomial import Polynomial
from .randomness import RandomSource, generate_prime
from .shamir import Share, evaluate_shares
from .validation import (
    ValidationIssue,
    require_valid,
    validate_modulus,
    validate_secret,
    validate_shares,
    validate_sharing_parameters,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeldmanVSSParams:
    """Generator ``g`` and prime modulus ``q`` of the commitment group."""

    g: int
    q: int

    def __post_init__(self) -> None:
        issues = validate_modulus(self.q, field="q")
        if not issues and not 2 <= self.g < self.q:
            issues.append(ValidationIssue("g", "generator must lie in [2, q)"))
        require_valid(issues)

    @classmethod
    def generate(
        cls,
        bits: int | None = None,
        g: int | None = None,
        *,
        rng: Optional[RandomSource] = None,
    ) -> "FeldmanVSSParams":
        """Pick a random ``bits``-bit prime ``q``; defaults come from the policy."""

        q = generate_prime(bits or policy.prime_bits, rng=rng)
        return cls(g=g if g is not None else policy.generator, q=q)


class Dealing(NamedTuple):
    shares: list[Share]
    commitments: list[int]


def verify_share(
    index: int,
    share_value: int,
    commitments: Sequence[int],
    params: FeldmanVSSParams,
) -> bool:
    """Check one share against the public commitments.

    ``False`` means the share is invalid or tampered with; it is an expected
    outcome for adversarial input, never an exception.
    """

    if index <= 0 or index % params.q == 0 or share_value < 0 or not commitments:
        _logger.warning("Rejected malformed share %d", index)
        return False
    q = params.q
    lhs = mod_exp(params.g, share_value, q)
    rhs = 1
    for k, commitment in enumerate(commitments):
        exponent = mod_exp(index, k, q)
        rhs = (rhs * mod_exp(commitment, exponent, q)) % q
    if lhs != rhs:
        _logger.warning("Share %d does not match the commitments", index)
        record_event("feldman.share_rejected", details={"index": index})
        return False
    return True


def find_invalid_shares(
    shares: Sequence[Tuple[int, int]],
    commitments: Sequence[int],
    params: FeldmanVSSParams,
) -> list[int]:
    """Return the indices of the shares that fail :func:`verify_share`."""

    return [
        index
        for index, value in shares
        if not verify_share(index, value, commitments, params)
    ]


def reconstruct_secret(shares: Sequence[Tuple[int, int]], q: int) -> Optional[int]:
    """Recover the secret modulo ``q``, or ``None`` if interpolation fails."""

    require_valid(validate_shares(shares, q), validate_modulus(q, field="q"))
    secret = interpolate_at_zero(shares, q)
    if secret is None:
        record_event(
            "reconstruct.failed",
            details={"indices": [index for index, _ in shares]},
        )
    return secret


def _evaluation_bound(secret: int, max_bits: int, threshold: int, num_shares: int) -> int:
    # largest P(x) for x <= num_shares
    coefficient = max(secret, (1 << max_bits) - 1)
    return coefficient * sum(num_shares**k for k in range(threshold))


def _largest_max_bits(q: int, threshold: int, num_shares: int) -> int:
    """Largest ``max_bits`` whose random coefficients keep every ``P(x) < q``."""

    largest_coefficient = (q - 1) // sum(num_shares**k for k in range(threshold))
    return max((largest_coefficient + 1).bit_length() - 1, 1)


class FeldmanVSS:
    """Deal verifiable shares in the group described by ``params``."""

    def __init__(self, params: FeldmanVSSParams, *, rng: Optional[RandomSource] = None) -> None:
        self.params = params
        self._rng = rng

    def generate_shares(
        self,
        secret: int,
        threshold: int,
        num_shares: int,
        *,
        max_bits: int | None = None,
    ) -> Dealing:
        """Split ``secret`` and commit to every coefficient of the polynomial.

        Coefficients are drawn below ``2**max_bits``. Every evaluation must
        stay below ``q`` for the commitments to verify, which is checked up
        front; by default ``max_bits`` is the largest size meeting that bound.
        """

        q = self.params.q
        issues = validate_sharing_parameters(threshold, num_shares) + validate_secret(secret, q)
        if max_bits is None:
            max_bits = _largest_max_bits(q, threshold, num_shares) if not issues else 1
        if max_bits < 1:
            issues.append(ValidationIssue("max_bits", "max_bits must be at least 1"))
        elif not issues and _evaluation_bound(secret, max_bits, threshold, num_shares) >= q:
            issues.append(
                ValidationIssue(
                    "q",
                    "q is too small for the coefficient size and share count; "
                    "share evaluations would wrap around",
                )
            )
        require_valid(issues)

        poly = Polynomial.for_secret(threshold - 1, max_bits, secret, rng=self._rng)
        shares = evaluate_shares(poly, num_shares, q)
        commitments = self.generate_commitments(poly)
        _logger.debug(
            "Dealt %d verifiable shares with threshold %d", num_shares, threshold
        )
        record_event("feldman.deal", details={"threshold": threshold, "num_shares": num_shares})
        return Dealing(shares, commitments)

    def generate_commitments(self, polynomial: Polynomial) -> list[int]:
        """Commit to each coefficient as ``g**c mod q``."""

        return [mod_exp(self.params.g, c, self.params.q) for c in polynomial.coefficients]

    def verify_share(self, index: int, share_value: int, commitments: Sequence[int]) -> bool:
        return verify_share(index, share_value, commitments, self.params)

    def reconstruct_secret(self, shares: Sequence[Tuple[int, int]]) -> Optional[int]:
        return reconstruct_secret(shares, self.params.q)


__all__ = [
    "Dealing",
    "FeldmanVSS",
    "FeldmanVSSParams",
    "find_invalid_shares",
    "reconstruct_secret",
    "verify_share",
]
