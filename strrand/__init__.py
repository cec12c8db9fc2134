"""Strrand Python implementation.

This package generates random strings of an exact length from predefined or
custom character sets, using a cryptographically secure random source.

Main Components:
    - RandomStringGenerator: Generator bound to an entropy source
    - Functions: binary, hexadecimal, base62, generate_string, ...
    - Charsets: Predefined character set constants
    - Interfaces: Protocol definition for entropy sources

Example:
    >>> import strrand
    >>> token = strrand.base62(22)
    >>> pin = strrand.generate_string(6, "0123456789")
"""

import logging
from importlib.metadata import version

from strrand.api import (
    RandomStringGenerator,
    RandomStringGeneratorConfig,
    base62,
    base64,
    binary,
    capital_letters,
    decimal,
    default_string,
    generate_string,
    hexadecimal,
    letters,
    lowercase_letters,
    octal,
    special_letters,
)
from strrand.charsets import (
    ALPHABET_CHARSET,
    BASE62_CHARSET,
    BASE64_CHARSET,
    BINARY_CHARSET,
    DECIMAL_CHARSET,
    DEFAULT_CHARSET,
    HEXADECIMAL_CHARSET,
    LOWERCASE_CHARSET,
    NAMED_CHARSETS,
    OCTAL_CHARSET,
    SPECIAL_CHARSET,
    UPPERCASE_CHARSET,
    get_charset,
)
from strrand.entropy import SystemEntropy
from strrand.exceptions import (
    EntropyUnavailableError,
    InvalidCharsetError,
    StrRandError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("strrand")

__all__ = [
    # API
    "RandomStringGenerator",
    "RandomStringGeneratorConfig",
    "SystemEntropy",
    "binary",
    "octal",
    "decimal",
    "hexadecimal",
    "capital_letters",
    "lowercase_letters",
    "special_letters",
    "base62",
    "base64",
    "letters",
    "default_string",
    "generate_string",
    # Charsets
    "BINARY_CHARSET",
    "OCTAL_CHARSET",
    "DECIMAL_CHARSET",
    "HEXADECIMAL_CHARSET",
    "UPPERCASE_CHARSET",
    "LOWERCASE_CHARSET",
    "SPECIAL_CHARSET",
    "ALPHABET_CHARSET",
    "BASE62_CHARSET",
    "BASE64_CHARSET",
    "DEFAULT_CHARSET",
    "NAMED_CHARSETS",
    "get_charset",
    # Exceptions
    "StrRandError",
    "EntropyUnavailableError",
    "InvalidCharsetError",
]
