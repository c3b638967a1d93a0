"""
Custom exceptions for Passwright.
"""


class PasswrightException(Exception):
    """Base exception for Passwright."""

    pass


class InvalidArgumentError(PasswrightException, ValueError):
    """Random sampler called with an unusable bound."""

    pass


class InvalidLengthError(PasswrightException, ValueError):
    """Requested password length is not an integer in range."""

    pass


class NoClassEnabledError(PasswrightException, ValueError):
    """No character class was selected."""

    pass


class EmptyPoolError(PasswrightException, ValueError):
    """Ambiguity filtering left no characters to draw from."""

    pass
