"""Errors raised by the generators and the interface they share."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeedError(Exception):
    """Base class for every error a generator raises."""


class InsufficientEntropyError(SeedError):
    """Too little entropy was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Insufficient entropy was provided to meet the minimum supported "
            "entropy level of 112 bits"
        )


class LengthError(SeedError):
    """An input or output had a length the generator cannot accept."""

    def __init__(self, max_size: int, requested_size: int) -> None:
        self.max_size = max_size
        self.requested_size = requested_size
        super().__init__(
            f"Requested size of {requested_size} bytes exceeds "
            f"maximum size of {max_size} bytes"
        )


class EmptyNonceError(SeedError):
    """A nonce was required but none was given."""

    def __init__(self) -> None:
        super().__init__("Nonce must not be empty")


class CounterExhaustedError(SeedError):
    """The generator has produced its allowed number of outputs and must be reseeded."""

    def __init__(self) -> None:
        super().__init__("Counter has been exhausted, reseed")


class Drbg(ABC):
    """A deterministic random bit generator.

    ``reseed`` corresponds to the reseed function of the standard and
    ``random_bytes`` to its generate function, returning whole bytes.
    """

    @abstractmethod
    def reseed(self, entropy: bytes, additional_input: bytes = b"") -> None:
        """Mix fresh entropy and optional additional input into the state."""

    @abstractmethod
    def random_bytes(self, length: int, additional_input: bytes = b"") -> bytes:
        """Return ``length`` pseudorandom bytes."""