"""Tests for the system entropy source."""

from __future__ import annotations

import secrets

import pytest

from strrand.entropy import SystemEntropy
from strrand.exceptions import EntropyUnavailableError, StrRandError


def test_read_length() -> None:
    """Test that reads return the requested number of bytes."""
    entropy = SystemEntropy()

    assert len(entropy.read(4)) == 4
    assert len(entropy.read(64)) == 64


def test_read_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that OS random failures surface as EntropyUnavailableError."""

    def fail(length: int) -> bytes:
        raise OSError("getrandom denied")

    monkeypatch.setattr(secrets, "token_bytes", fail)

    with pytest.raises(EntropyUnavailableError) as exc_info:
        SystemEntropy().read(4)

    assert isinstance(exc_info.value, StrRandError)
    assert isinstance(exc_info.value.__cause__, OSError)
