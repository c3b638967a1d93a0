"""
Password engine: pool construction, generation and strength estimation.
"""

from .charsets import (
    AMBIGUOUS_CHARS,
    CLASS_ORDER,
    CharacterClass,
    alphabet_for,
    pool_for,
    pool_size,
)
from .generator import GenerationConfig, PasswordGenerator, generate, generate_password
from .strength import StrengthReport, describe_strength, estimate_entropy_bits, strength_label

__all__ = [
    'AMBIGUOUS_CHARS',
    'CLASS_ORDER',
    'CharacterClass',
    'GenerationConfig',
    'PasswordGenerator',
    'StrengthReport',
    'alphabet_for',
    'describe_strength',
    'estimate_entropy_bits',
    'generate',
    'generate_password',
    'pool_for',
    'pool_size',
    'strength_label',
]
