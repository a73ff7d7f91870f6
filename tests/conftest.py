"""Pytest configuration and shared fixtures."""

import struct
from collections.abc import Iterator

import pytest

from embedwire.config import get_settings

# IEEE-754 single bit patterns that must survive packing untouched.
SPECIAL_FLOAT_BITS = [
    0x3F800000,  # 1.0
    0x80000000,  # -0.0
    0x7F800000,  # inf
    0xFF800000,  # -inf
    0x7FC00000,  # quiet NaN
    0x00000001,  # smallest subnormal
    0x7F7FFFFF,  # largest finite
    0xBEAAAAAB,  # -1/3 rounded
]


def floats_from_bits(bits: list[int]) -> list[float]:
    """Build float32 values from their bit patterns."""
    raw = struct.pack(f"<{len(bits)}I", *bits)
    return list(struct.unpack(f"<{len(bits)}f", raw))


@pytest.fixture
def special_floats() -> list[float]:
    """Float32 values including signed zero, infinities and NaN."""
    return floats_from_bits(SPECIAL_FLOAT_BITS)


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
