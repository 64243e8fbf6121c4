"""Dense univariate polynomials used as sharing polynomials."""
from __future__ import annotations

from typing import Iterable, Optional

from .randomness import RandomSource, random_integer
from .validation import ValidationIssue, require_valid


class Polynomial:
    """Coefficients ``c0..cd`` of ``c0 + c1*x + ... + cd*x^d``.

    When built with :meth:`for_secret`, ``c0`` is the shared secret and the
    other coefficients are random blinding values. Evaluation is not reduced;
    the Shamir engine reduces the raw value against its field modulus and the
    Feldman engine against ``q``.
    """

    def __init__(self, coefficients: Iterable[int]) -> None:
        coefficients = list(coefficients)
        issues = []
        if not coefficients:
            issues.append(ValidationIssue("coefficients", "a polynomial needs a constant term"))
        if any(c < 0 for c in coefficients):
            issues.append(ValidationIssue("coefficients", "coefficients must be non-negative"))
        require_valid(issues)
        self.coefficients: list[int] = coefficients

    @staticmethod
    def _check_shape(degree: int, max_bits: int) -> None:
        issues = []
        if degree < 0:
            issues.append(ValidationIssue("degree", "degree must be non-negative (threshold >= 1)"))
        if max_bits < 1:
            issues.append(ValidationIssue("max_bits", "max_bits must be at least 1"))
        require_valid(issues)

    @classmethod
    def random(
        cls,
        degree: int,
        max_bits: int,
        *,
        rng: Optional[RandomSource] = None,
    ) -> "Polynomial":
        """All ``degree + 1`` coefficients drawn from ``[1, 2**max_bits)``."""

        cls._check_shape(degree, max_bits)
        bound = 1 << max_bits
        return cls(random_integer(bound, rng=rng) for _ in range(degree + 1))

    @classmethod
    def for_secret(
        cls,
        degree: int,
        max_bits: int,
        secret: int,
        *,
        rng: Optional[RandomSource] = None,
    ) -> "Polynomial":
        """Constant term ``secret``, other coefficients from ``[1, 2**max_bits)``."""

        cls._check_shape(degree, max_bits)
        if secret < 0:
            require_valid([ValidationIssue("secret", "secret must be non-negative")])
        bound = 1 << max_bits
        return cls([secret] + [random_integer(bound, rng=rng) for _ in range(degree)])

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def evaluate(self, x: int, *, modulus: Optional[int] = None) -> int:
        """Return ``P(x)``; reduced only when ``modulus`` is given."""

        result = 0
        for coefficient in reversed(self.coefficients):
            result = result * x + coefficient
        if modulus is not None:
            return result % modulus
        return result

    def __len__(self) -> int:
        return len(self.coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __repr__(self) -> str:
        return f"Polynomial({self.coefficients!r})"

    def __str__(self) -> str:
        terms = []
        for power, coefficient in enumerate(self.coefficients):
            if power == 0:
                terms.append(f"{coefficient}")
            elif power == 1:
                terms.append(f"{coefficient}x")
            else:
                terms.append(f"{coefficient}x^{power}")
        return " + ".join(terms)


__all__ = ["Polynomial"]
