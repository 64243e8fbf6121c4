"""Micro-benchmarks for share generation, verification and reconstruction."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from . import feldman, shamir
from .feldman import FeldmanVSS, FeldmanVSSParams
from .randomness import RandomSource

SSS_SECRET = 12345
SSS_MODULUS = 2**31 - 1  # 7919 in the original fixtures is smaller than the secret
VSS_SECRET = 986743267
THRESHOLD = 3
NUM_SHARES = 5


@dataclass
class BenchResult:
    name: str
    iterations: int
    mean_ms: float


def _measure(name: str, iterations: int, fn: Callable[[], object]) -> BenchResult:
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    elapsed_ms = (time.perf_counter() - start) * 1000
    return BenchResult(name, iterations, elapsed_ms / iterations)


def run_benchmarks(
    iterations: int = 100,
    prime_bits: int = 256,
    *,
    rng: Optional[RandomSource] = None,
) -> list[BenchResult]:
    """Time the five sharing operations; group setup is excluded from timing."""

    sss_shares = shamir.generate_shares(SSS_SECRET, THRESHOLD, NUM_SHARES, SSS_MODULUS, rng=rng)
    params = FeldmanVSSParams.generate(prime_bits, 2, rng=rng)
    vss = FeldmanVSS(params, rng=rng)
    shares, commitments = vss.generate_shares(VSS_SECRET, THRESHOLD, NUM_SHARES)

    def _verify_all() -> None:
        for index, value in shares:
            if not feldman.verify_share(index, value, commitments, params):
                raise AssertionError(f"share {index} failed verification")

    return [
        _measure(
            "SSS Share Generation",
            iterations,
            lambda: shamir.generate_shares(SSS_SECRET, THRESHOLD, NUM_SHARES, SSS_MODULUS, rng=rng),
        ),
        _measure(
            "SSS Secret Reconstruction",
            iterations,
            lambda: shamir.reconstruct_secret(sss_shares[:THRESHOLD], SSS_MODULUS),
        ),
        _measure(
            "VSS Share Generation",
            iterations,
            lambda: vss.generate_shares(VSS_SECRET, THRESHOLD, NUM_SHARES),
        ),
        _measure("VSS Share Verification", iterations, _verify_all),
        _measure(
            "VSS Secret Reconstruction",
            iterations,
            lambda: feldman.reconstruct_secret(shares[:THRESHOLD], params.q),
        ),
    ]


__all__ = ["BenchResult", "run_benchmarks"]
