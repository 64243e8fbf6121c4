"""Shamir's Secret Sharing and Feldman's Verifiable Secret Sharing."""

from .arith import extended_gcd, mod_exp, mod_inverse
from .feldman import (
    Dealing,
    FeldmanVSS,
    FeldmanVSSParams,
    find_invalid_shares,
    verify_share,
)
from .lagrange import interpolate_at_zero
from .polynomial import Polynomial
from .randomness import generate_prime, random_integer
from .shamir import Share, generate_shares, reconstruct_secret
from .validation import ParameterError

__version__ = "0.1.0"

__all__ = [
    "Dealing",
    "FeldmanVSS",
    "FeldmanVSSParams",
    "ParameterError",
    "Polynomial",
    "Share",
    "extended_gcd",
    "find_invalid_shares",
    "generate_prime",
    "generate_shares",
    "interpolate_at_zero",
    "mod_exp",
    "mod_inverse",
    "random_integer",
    "reconstruct_secret",
    "verify_share",
]
