"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from account_select.metrics import reset_selection_metrics

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


def _address_with_slot(slot: int, length: int = 32) -> bytes:
    return slot.to_bytes(2, "little") + bytes(length - 2)


@pytest.fixture
def address_with_slot() -> Callable[..., bytes]:
    """Factory for addresses whose first two bytes encode a slot little-endian."""
    return _address_with_slot


@pytest.fixture
def zero_address() -> bytes:
    """32 zero bytes."""
    return bytes(32)


@pytest.fixture
def one_address() -> bytes:
    """32 bytes starting with 1."""
    return bytes([1]) + bytes(31)


@pytest.fixture(autouse=True)
def _clean_metrics() -> Generator[None, None, None]:
    """Isolate the global selection metrics between tests."""
    reset_selection_metrics()
    yield
    reset_selection_metrics()
