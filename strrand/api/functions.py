"""Module-level convenience functions.

Each function forwards to a process-wide generator using system entropy.
"""

from __future__ import annotations

from strrand.api.generator import RandomStringGenerator

_default = RandomStringGenerator()


def binary(length: int) -> str:
    """Generate a string from ``01``."""
    return _default.binary(length)


def octal(length: int) -> str:
    """Generate a string from ``01234567``."""
    return _default.octal(length)


def decimal(length: int) -> str:
    """Generate a string from ``0123456789``."""
    return _default.decimal(length)


def hexadecimal(length: int) -> str:
    """Generate a string from ``0123456789abcdef``."""
    return _default.hexadecimal(length)


def capital_letters(length: int) -> str:
    """Generate a string of uppercase letters."""
    return _default.capital_letters(length)


def lowercase_letters(length: int) -> str:
    """Generate a string of lowercase letters."""
    return _default.lowercase_letters(length)


def special_letters(length: int) -> str:
    """Generate a string of special characters."""
    return _default.special_letters(length)


def base62(length: int) -> str:
    """Generate a string from the base62 alphabet (digits, then A-Z, then a-z)."""
    return _default.base62(length)


def base64(length: int) -> str:
    """Generate a string from the base62 alphabet plus ``+/``."""
    return _default.base64(length)


def letters(length: int) -> str:
    """Generate a string of upper and lowercase letters."""
    return _default.letters(length)


def default_string(length: int) -> str:
    """Generate a string from the base62 alphabet plus special characters."""
    return _default.default_string(length)


def generate_string(length: int, *custom_charset: str) -> str:
    """Generate a string from a custom charset, or the default one.

    Args:
        length: Number of characters to generate.
        *custom_charset: Optional charset to sample from. Only the first is used.

    Returns:
        The generated string.
    """
    return _default.generate_string(length, *custom_charset)
