"""Entropy generation utilities.

This module provides the operating system backed source of cryptographically
secure random bytes.
"""

from __future__ import annotations

import logging
import secrets

from strrand.exceptions import EntropyUnavailableError
from strrand.interfaces import IEntropySource

logger = logging.getLogger(__name__)


class SystemEntropy(IEntropySource):
    """Entropy source backed by the OS CSPRNG via :mod:`secrets`."""

    def read(self, length: int) -> bytes:
        """Generate cryptographically secure random bytes.

        Args:
            length: The number of random bytes to generate.

        Returns:
            A bytes object containing the requested amount of random data.

        Raises:
            EntropyUnavailableError: If the OS random source cannot be read.
        """
        try:
            return secrets.token_bytes(length)
        except (OSError, NotImplementedError) as e:
            logger.error("system entropy source failed: %s", e)
            raise EntropyUnavailableError("secure random source unavailable") from e
