"""
Character classes and pool construction.
"""

from enum import Enum
from typing import Dict, Iterable, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .generator import GenerationConfig


class CharacterClass(Enum):
    """Character classes, declared in pool order."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @classmethod
    def parse(cls, name: str) -> "CharacterClass":
        """
        Look up a class by name.

        Accepts canonical names ("lowercase", "digit", ...) as well as the
        short option names ("lower", "upper", "digits", "symbols").

        Raises:
            ValueError: If the name is unknown
        """
        key = name.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown character class: {name!r}")


_ALIASES: Dict[str, CharacterClass] = {
    "lowercase": CharacterClass.LOWERCASE,
    "lower": CharacterClass.LOWERCASE,
    "uppercase": CharacterClass.UPPERCASE,
    "upper": CharacterClass.UPPERCASE,
    "digit": CharacterClass.DIGIT,
    "digits": CharacterClass.DIGIT,
    "symbol": CharacterClass.SYMBOL,
    "symbols": CharacterClass.SYMBOL,
}

# Stable class order used for pool concatenation and required draws
CLASS_ORDER: List[CharacterClass] = list(CharacterClass)

ALPHABETS: Dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.DIGIT: "0123456789",
    CharacterClass.SYMBOL: "!@#$%^&*()-_=+[{]}\\|;:'\",<.>/?",
}

# Glyphs that are easy to confuse in common fonts
AMBIGUOUS_CHARS = frozenset("O0oIl1|{}[]()<>")


def alphabet_for(char_class: CharacterClass, avoid_ambiguous: bool) -> str:
    """
    Return the effective alphabet for a character class.

    Args:
        char_class: Class to look up
        avoid_ambiguous: Drop look-alike glyphs, keeping the order of the rest

    Returns:
        Alphabet string (may be empty after filtering)
    """
    base = ALPHABETS[char_class]
    if not avoid_ambiguous:
        return base
    return "".join(c for c in base if c not in AMBIGUOUS_CHARS)


def ordered_classes(classes: Iterable[CharacterClass]) -> List[CharacterClass]:
    """Sort a collection of classes into pool order."""
    wanted = set(classes)
    return [c for c in CLASS_ORDER if c in wanted]


def pool_for(config: "GenerationConfig") -> str:
    """Concatenate the filtered alphabets of every enabled class."""
    return "".join(
        alphabet_for(c, config.avoid_ambiguous)
        for c in ordered_classes(config.enabled_classes)
    )


def pool_size(config: "GenerationConfig") -> int:
    """
    Number of characters the generator can draw from for a config.

    Returns 0 when no class is enabled or every enabled alphabet was
    emptied by ambiguity filtering.
    """
    return sum(
        len(alphabet_for(c, config.avoid_ambiguous))
        for c in ordered_classes(config.enabled_classes)
    )
