"""Big-endian modular arithmetic on fixed-width byte strings."""

from __future__ import annotations


def increment(value: bytes) -> bytes:
    """Return ``value + 1`` modulo ``2**(8*len(value))`` as big-endian bytes."""
    size = len(value)
    if size == 0:
        return b""
    number = (int.from_bytes(value, "big") + 1) % (1 << (8 * size))
    return number.to_bytes(size, "big")


def add(a: bytes, b: bytes) -> bytes:
    """Return ``a + b`` modulo ``2**(8*len(a))`` as big-endian bytes of ``len(a)``."""
    size = len(a)
    if size == 0:
        return b""
    number = (int.from_bytes(a, "big") + int.from_bytes(b, "big")) % (1 << (8 * size))
    return number.to_bytes(size, "big")