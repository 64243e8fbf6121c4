"""Input validation for sharing sessions and share sets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple


class ParameterError(ValueError):
    """Raised when a sharing operation receives invalid parameters."""

    def __init__(self, issues: Sequence["ValidationIssue"]) -> None:
        self.issues = list(issues)
        super().__init__("; ".join(f"{issue.field}: {issue.message}" for issue in self.issues))


@dataclass
class ValidationIssue:
    field: str
    message: str


def validate_sharing_parameters(threshold: int, num_shares: int) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if threshold < 1:
        issues.append(ValidationIssue("threshold", "threshold must be at least 1"))
    if num_shares < threshold:
        issues.append(
            ValidationIssue(
                "num_shares",
                f"num_shares ({num_shares}) must not be lower than threshold ({threshold})",
            )
        )
    return issues


def validate_modulus(modulus: int, *, field: str = "modulus") -> list[ValidationIssue]:
    if modulus <= 1:
        return [ValidationIssue(field, "modulus must be greater than 1")]
    return []


def validate_secret(secret: int, modulus: int) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if secret < 0:
        issues.append(ValidationIssue("secret", "secret must be non-negative"))
    elif secret >= modulus:
        issues.append(
            ValidationIssue("secret", "secret must be smaller than the field modulus")
        )
    return issues


def validate_shares(
    shares: Sequence[Tuple[int, int]],
    modulus: int | None = None,
) -> list[ValidationIssue]:
    """Check share coordinates; index 0 is reserved for the secret itself.

    With ``modulus`` given, indices congruent to 0 are rejected as well, since
    they denote the same field element.
    """

    issues: list[ValidationIssue] = []
    if not shares:
        issues.append(ValidationIssue("shares", "at least one share is required"))
        return issues
    for index, value in shares:
        if index == 0:
            issues.append(ValidationIssue("shares", "share index 0 is reserved for the secret"))
        elif index < 0:
            issues.append(ValidationIssue("shares", f"share index {index} is negative"))
        elif modulus is not None and modulus > 1 and index % modulus == 0:
            issues.append(
                ValidationIssue(
                    "shares",
                    f"share index {index} is congruent to 0, which is reserved for the secret",
                )
            )
        if value < 0:
            issues.append(ValidationIssue("shares", f"share {index} has a negative value"))
    return issues


def collect_issues(*sources: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    aggregated: list[ValidationIssue] = []
    for source in sources:
        aggregated.extend(source)
    return aggregated


def require_valid(*sources: Iterable[ValidationIssue]) -> None:
    """Raise :class:`ParameterError` if any source reported an issue."""

    issues = collect_issues(*sources)
    if issues:
        raise ParameterError(issues)


__all__ = [
    "ParameterError",
    "ValidationIssue",
    "collect_issues",
    "require_valid",
    "validate_modulus",
    "validate_secret",
    "validate_shares",
    "validate_sharing_parameters",
]
