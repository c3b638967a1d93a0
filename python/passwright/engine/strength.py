"""
Password strength estimation.

Estimates assume every character is drawn independently and uniformly from
the pool, so they are an upper bound: the one-per-required-class guarantee
slightly reduces real entropy and is not accounted for.
"""

import math
from typing import NamedTuple, TYPE_CHECKING

from .charsets import pool_size

if TYPE_CHECKING:
    from .generator import GenerationConfig

# Strength meter saturates here
METER_CAP_BITS = 128

# (upper bound in bits, label), checked in order
STRENGTH_LEVELS = [
    (25, "very weak"),
    (35, "weak"),
    (50, "fair"),
    (70, "strong"),
]


class StrengthReport(NamedTuple):
    """Strength summary for a configuration."""
    pool_size: int
    bits: int
    label: str
    fraction: float


def estimate_entropy_bits(length: int, pool_size: int) -> int:
    """
    Estimate password entropy as ``length * log2(pool_size)``.

    Args:
        length: Password length
        pool_size: Number of characters in the pool

    Returns:
        Entropy in bits rounded half-up, or 0 if either input is zero
    """
    if not length or not pool_size:
        return 0
    return int(math.floor(length * math.log2(pool_size) + 0.5))


def meter_fraction(bits: int) -> float:
    """Fill level of a strength meter in [0, 1]."""
    return max(0, min(bits, METER_CAP_BITS)) / METER_CAP_BITS


def strength_label(bits: int) -> str:
    if bits <= 0:
        return "none"
    for upper, label in STRENGTH_LEVELS:
        if bits < upper:
            return label
    return "very strong"


def describe_strength(config: "GenerationConfig") -> StrengthReport:
    """Recompute pool size and strength figures for a configuration."""
    size = pool_size(config)
    bits = estimate_entropy_bits(config.length, size)
    return StrengthReport(size, bits, strength_label(bits), meter_fraction(bits))
