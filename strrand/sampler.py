"""Random index sampling.

This module reduces secure random bytes to an index into a charset.
"""

from __future__ import annotations

import logging

from strrand.entropy import SystemEntropy
from strrand.exceptions import EntropyUnavailableError, InvalidCharsetError
from strrand.interfaces import IEntropySource

logger = logging.getLogger(__name__)

DRAW_SIZE = 4
DRAW_RANGE = 1 << (8 * DRAW_SIZE)


class IndexSampler:
    """Draws indexes in ``[0, n)`` from a secure entropy source.

    Each draw is 4 bytes read as an unsigned 32-bit big-endian integer. By
    default draws that would bias the result are rejected and redrawn; with
    ``unbiased=False`` the draw is reduced modulo ``n`` directly.

    Attributes:
        entropy: The source of random bytes.
        unbiased: Whether to use rejection sampling.
    """

    def __init__(
        self, entropy: IEntropySource | None = None, unbiased: bool = True
    ) -> None:
        """Initialize the sampler.

        Args:
            entropy: Source of random bytes. Defaults to :class:`SystemEntropy`.
            unbiased: Whether to use rejection sampling.
        """
        self.entropy: IEntropySource = entropy if entropy is not None else SystemEntropy()
        self.unbiased = unbiased

    def index(self, n: int) -> int:
        """Sample an index into a sequence of ``n`` items.

        Args:
            n: The size of the sequence.

        Returns:
            An integer in ``[0, n)``.

        Raises:
            InvalidCharsetError: If ``n`` is less than 1 or above 2**32.
            EntropyUnavailableError: If the entropy source fails.
        """
        if n < 1:
            raise InvalidCharsetError("cannot sample from an empty charset")
        if n > DRAW_RANGE:
            raise InvalidCharsetError(f"charset too large: {n} characters")

        if not self.unbiased:
            return self._draw() % n

        limit = DRAW_RANGE - DRAW_RANGE % n
        while True:
            value = self._draw()
            if value < limit:
                return value % n
            logger.debug("rejected draw %d (limit %d)", value, limit)

    def _draw(self) -> int:
        data = self.entropy.read(DRAW_SIZE)
        if len(data) != DRAW_SIZE:
            raise EntropyUnavailableError(
                f"short read from entropy source: expected {DRAW_SIZE} bytes, got {len(data)}"
            )
        return int.from_bytes(data, byteorder="big")
