"""
Secure password generation.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from ..exceptions import EmptyPoolError, InvalidLengthError, NoClassEnabledError
from ..utils.random_source import RandomSource, get_default_source, sample_below
from ..utils.validation import get_length_error_message, validate_length
from .charsets import CharacterClass, alphabet_for, ordered_classes, pool_for
from .strength import estimate_entropy_bits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Options for a single generation call.

    ``required_classes`` defaults to every enabled class. Required classes
    that are not enabled are ignored.
    """

    length: int = 16
    enabled_classes: FrozenSet[CharacterClass] = frozenset(
        {CharacterClass.LOWERCASE, CharacterClass.UPPERCASE, CharacterClass.DIGIT}
    )
    avoid_ambiguous: bool = True
    required_classes: Optional[FrozenSet[CharacterClass]] = None

    @classmethod
    def from_flags(cls,
                   length: int = 16,
                   lower: bool = True,
                   upper: bool = True,
                   digits: bool = True,
                   symbols: bool = False,
                   avoid_ambiguous: bool = True,
                   required: Optional[Iterable[CharacterClass]] = None) -> "GenerationConfig":
        """Build a config from one boolean per character class."""
        flags = {
            CharacterClass.LOWERCASE: lower,
            CharacterClass.UPPERCASE: upper,
            CharacterClass.DIGIT: digits,
            CharacterClass.SYMBOL: symbols,
        }
        return cls(
            length=length,
            enabled_classes=frozenset(c for c, on in flags.items() if on),
            avoid_ambiguous=avoid_ambiguous,
            required_classes=None if required is None else frozenset(required),
        )

    @property
    def effective_required(self) -> List[CharacterClass]:
        """Required classes that are enabled, in pool order."""
        if self.required_classes is None:
            return ordered_classes(self.enabled_classes)
        return ordered_classes(self.required_classes & self.enabled_classes)


class PasswordGenerator:
    """Generate secure passwords for a validated configuration."""

    def __init__(self, config: GenerationConfig, random_source: Optional[RandomSource] = None):
        """
        Validate the configuration and build the master pool.

        Args:
            config: Generation options
            random_source: Source of secure random bytes (system CSPRNG by default)

        Raises:
            InvalidLengthError: If the length is not an integer in [1, 1024]
            NoClassEnabledError: If no character class is enabled
            EmptyPoolError: If filtering removed every candidate character
        """
        if not validate_length(config.length):
            raise InvalidLengthError(get_length_error_message(config.length))

        if not config.enabled_classes:
            raise NoClassEnabledError("Enable at least one character set")

        self.config = config
        self.random_source = random_source or get_default_source()
        self.pool = pool_for(config)

        if not self.pool:
            raise EmptyPoolError("Pool is empty after applying 'avoid ambiguous' filter")

    @property
    def pool_size(self) -> int:
        return len(self.pool)

    def entropy_bits(self) -> int:
        """Upper-bound strength estimate for passwords from this generator."""
        return estimate_entropy_bits(self.config.length, self.pool_size)

    def _pick(self, alphabet: str) -> str:
        return alphabet[sample_below(len(alphabet), self.random_source)]

    def _shuffle(self, chars: List[str]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(chars) - 1, 0, -1):
            j = sample_below(i + 1, self.random_source)
            chars[i], chars[j] = chars[j], chars[i]

    def generate(self) -> str:
        """
        Generate a secure password.

        Returns:
            Password of exactly ``config.length`` characters
        """
        length = self.config.length
        out: List[str] = []

        # One character from each required class before the random fill
        for char_class in self.config.effective_required:
            alphabet = alphabet_for(char_class, self.config.avoid_ambiguous)
            if alphabet:
                out.append(self._pick(alphabet))

        required_count = len(out)

        while len(out) < length:
            out.append(self._pick(self.pool))

        self._shuffle(out)

        if required_count > length:
            logger.debug(
                f"Required classes ({required_count}) exceed length ({length}); "
                f"dropping {required_count - length} guaranteed characters"
            )

        logger.debug(f"Generated {length}-character password from pool of {self.pool_size}")
        return "".join(out[:length])

    def get_charset_info(self) -> str:
        """
        Get human-readable description of character set.

        Returns:
            Description of enabled character types
        """
        info = ", ".join(c.value for c in ordered_classes(self.config.enabled_classes))

        if self.config.avoid_ambiguous:
            info += " (excluding ambiguous chars)"

        return info


def generate(config: GenerationConfig, random_source: Optional[RandomSource] = None) -> str:
    """Generate one password for ``config``."""
    return PasswordGenerator(config, random_source).generate()


def generate_password(length: int = 16,
                      use_lowercase: bool = True,
                      use_uppercase: bool = True,
                      use_digits: bool = True,
                      use_symbols: bool = False,
                      avoid_ambiguous: bool = True,
                      required: Optional[Iterable[CharacterClass]] = None,
                      random_source: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (1-1024)
        use_lowercase: Include lowercase letters
        use_uppercase: Include uppercase letters
        use_digits: Include digits
        use_symbols: Include symbol characters
        avoid_ambiguous: Exclude visually ambiguous characters
        required: Classes guaranteed to appear (defaults to all enabled)
        random_source: Source of secure random bytes

    Returns:
        Generated password string
    """
    config = GenerationConfig.from_flags(
        length=length,
        lower=use_lowercase,
        upper=use_uppercase,
        digits=use_digits,
        symbols=use_symbols,
        avoid_ambiguous=avoid_ambiguous,
        required=required,
    )
    return generate(config, random_source)
