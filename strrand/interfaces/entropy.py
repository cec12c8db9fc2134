"""Entropy interfaces for strrand.

This module defines the protocol for sources of secure random bytes.
"""

from __future__ import annotations

from typing import Protocol


class IEntropySource(Protocol):
    """Interface for cryptographically secure random byte sources."""

    def read(self, length: int) -> bytes:
        """Read random bytes from the source.

        Args:
            length: The number of random bytes to read.

        Returns:
            A bytes object of exactly ``length`` bytes.

        Raises:
            EntropyUnavailableError: When the source cannot supply entropy.
        """
        ...
