"""Predefined character sets.

Composite sets are built by concatenation, so their order is part of their
definition.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from strrand.exceptions import InvalidCharsetError

BINARY_CHARSET = "01"
OCTAL_CHARSET = "01234567"
DECIMAL_CHARSET = "0123456789"
HEXADECIMAL_CHARSET = "0123456789abcdef"

UPPERCASE_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CHARSET = "abcdefghijklmnopqrstuvwxyz"
SPECIAL_CHARSET = "!@#$%^&*()-_=+[]{}|;:',.<>?/`~"

ALPHABET_CHARSET = UPPERCASE_CHARSET + LOWERCASE_CHARSET
BASE62_CHARSET = DECIMAL_CHARSET + ALPHABET_CHARSET
BASE64_CHARSET = BASE62_CHARSET + "+/"
DEFAULT_CHARSET = BASE62_CHARSET + SPECIAL_CHARSET

NAMED_CHARSETS: Mapping[str, str] = MappingProxyType(
    {
        "binary": BINARY_CHARSET,
        "octal": OCTAL_CHARSET,
        "decimal": DECIMAL_CHARSET,
        "hexadecimal": HEXADECIMAL_CHARSET,
        "uppercase": UPPERCASE_CHARSET,
        "lowercase": LOWERCASE_CHARSET,
        "special": SPECIAL_CHARSET,
        "alphabet": ALPHABET_CHARSET,
        "base62": BASE62_CHARSET,
        "base64": BASE64_CHARSET,
        "default": DEFAULT_CHARSET,
    }
)


def get_charset(name: str) -> str:
    """Look up a predefined charset by name.

    Args:
        name: The charset name, e.g. ``"hexadecimal"``.

    Returns:
        The charset string.

    Raises:
        InvalidCharsetError: If no charset has that name.
    """
    try:
        return NAMED_CHARSETS[name]
    except KeyError as e:
        raise InvalidCharsetError(f"unknown charset: {name!r}") from e
