"""
Input validation utilities for Passwright.
"""

MIN_LENGTH = 1
MAX_LENGTH = 1024


def validate_length(length: object) -> bool:
    """
    Validate a requested password length.

    Args:
        length: The length to validate

    Returns:
        True if length is an integer in [MIN_LENGTH, MAX_LENGTH]
    """
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        return False

    return MIN_LENGTH <= length <= MAX_LENGTH


def get_length_error_message(length: object) -> str:
    """
    Get a descriptive error message for an invalid length.

    Args:
        length: The invalid length

    Returns:
        Error message describing why the length is invalid
    """
    if isinstance(length, bool) or not isinstance(length, int):
        return f"Length must be an integer, got {type(length).__name__}"

    if length < MIN_LENGTH:
        return f"Length must be at least {MIN_LENGTH}"

    if length > MAX_LENGTH:
        return f"Length cannot be greater than {MAX_LENGTH}"

    return "Length is invalid"
