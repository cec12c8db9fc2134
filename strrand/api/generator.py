"""Random string generator.

This module provides the RandomStringGenerator class, which binds a sampler
configuration to one generating method per predefined charset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from strrand.builder import build
from strrand.charsets import (
    ALPHABET_CHARSET,
    BASE62_CHARSET,
    BASE64_CHARSET,
    BINARY_CHARSET,
    DECIMAL_CHARSET,
    DEFAULT_CHARSET,
    HEXADECIMAL_CHARSET,
    LOWERCASE_CHARSET,
    OCTAL_CHARSET,
    SPECIAL_CHARSET,
    UPPERCASE_CHARSET,
)
from strrand.entropy import SystemEntropy
from strrand.interfaces import IEntropySource
from strrand.sampler import IndexSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RandomStringGeneratorConfig:
    """Configuration for a random string generator.

    Attributes:
        entropy: Source of cryptographically secure random bytes.
        unbiased: Use rejection sampling instead of plain modulo reduction.
    """

    entropy: IEntropySource = field(default_factory=SystemEntropy)
    unbiased: bool = True


class RandomStringGenerator:
    """Generates random strings from predefined or custom charsets.

    Example:
        >>> generator = RandomStringGenerator()
        >>> len(generator.hexadecimal(32))
        32
    """

    def __init__(self, config: RandomStringGeneratorConfig | None = None) -> None:
        """Initialize the generator.

        Args:
            config: Generator configuration. Defaults to system entropy with
                rejection sampling.
        """
        self.config = config if config is not None else RandomStringGeneratorConfig()
        self._sampler = IndexSampler(self.config.entropy, self.config.unbiased)

    def binary(self, length: int) -> str:
        """Generate a string from ``01``."""
        return self._random(length, BINARY_CHARSET)

    def octal(self, length: int) -> str:
        """Generate a string from ``01234567``."""
        return self._random(length, OCTAL_CHARSET)

    def decimal(self, length: int) -> str:
        """Generate a string from ``0123456789``."""
        return self._random(length, DECIMAL_CHARSET)

    def hexadecimal(self, length: int) -> str:
        """Generate a string from ``0123456789abcdef``."""
        return self._random(length, HEXADECIMAL_CHARSET)

    def capital_letters(self, length: int) -> str:
        """Generate a string of uppercase letters."""
        return self._random(length, UPPERCASE_CHARSET)

    def lowercase_letters(self, length: int) -> str:
        """Generate a string of lowercase letters."""
        return self._random(length, LOWERCASE_CHARSET)

    def special_letters(self, length: int) -> str:
        """Generate a string of special characters."""
        return self._random(length, SPECIAL_CHARSET)

    def base62(self, length: int) -> str:
        """Generate a string from the base62 alphabet (digits, then A-Z, then a-z)."""
        return self._random(length, BASE62_CHARSET)

    def base64(self, length: int) -> str:
        """Generate a string from the base62 alphabet plus ``+/``."""
        return self._random(length, BASE64_CHARSET)

    def letters(self, length: int) -> str:
        """Generate a string of upper and lowercase letters."""
        return self._random(length, ALPHABET_CHARSET)

    def default_string(self, length: int) -> str:
        """Generate a string from the base62 alphabet plus special characters."""
        return self._random(length, DEFAULT_CHARSET)

    def generate_string(self, length: int, *custom_charset: str) -> str:
        """Generate a string from a custom charset, or the default one.

        Only the first custom charset is used; any others are ignored.

        Args:
            length: Number of characters to generate.
            *custom_charset: Optional charset to sample from.

        Returns:
            The generated string.

        Raises:
            InvalidCharsetError: If the custom charset is empty and
                ``length`` is positive.
            EntropyUnavailableError: If the secure random source fails.
        """
        if not custom_charset:
            return self.default_string(length)

        if len(custom_charset) > 1:
            logger.debug("ignoring %d extra charsets", len(custom_charset) - 1)

        return self._random(length, custom_charset[0])

    def _random(self, length: int, charset: str) -> str:
        return build(length, charset, self._sampler)
