"""Strrand API package.

This package provides the generator class and module-level generating functions.
"""

from strrand.api.functions import (
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
from strrand.api.generator import RandomStringGenerator, RandomStringGeneratorConfig

__all__ = [
    # Generator
    "RandomStringGenerator",
    "RandomStringGeneratorConfig",
    # Functions
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
]
