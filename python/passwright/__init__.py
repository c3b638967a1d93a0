"""
Passwright - secure random password generator.
"""

from .engine import (
    CharacterClass,
    GenerationConfig,
    estimate_entropy_bits,
    generate,
    generate_password,
    pool_size,
)
from .exceptions import (
    EmptyPoolError,
    InvalidArgumentError,
    InvalidLengthError,
    NoClassEnabledError,
    PasswrightException,
)

__version__ = "0.1.0"

__all__ = [
    'CharacterClass',
    'EmptyPoolError',
    'GenerationConfig',
    'InvalidArgumentError',
    'InvalidLengthError',
    'NoClassEnabledError',
    'PasswrightException',
    'estimate_entropy_bits',
    'generate',
    'generate_password',
    'pool_size',
]
