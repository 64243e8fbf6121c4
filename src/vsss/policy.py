"""Centralised sharing policy configuration.

The policy gathers the tunables shared by the engines, the command line and
the audit trail. Values can be overridden by environment variables so that a
deployment can pick a larger default group or switch the audit trail on
without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class SharingPolicy:
    """Holds runtime defaults for group setup and auditing."""

    prime_bits: int = 256
    generator: int = 2
    audit_enabled: bool = False


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    prime_bits = _load_int("VSSS_PRIME_BITS", 256)
    generator = _load_int("VSSS_GENERATOR", 2)
    return SharingPolicy(
        prime_bits=prime_bits if prime_bits >= 2 else 256,
        generator=generator if generator >= 2 else 2,
        audit_enabled=_load_bool("VSSS_AUDIT", False),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]
