"""Hash_DRBG from NIST SP 800-90A Rev. 1, section 10.1.1."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator
from typing import ClassVar

from .arithmetic import add, increment
from .errors import CounterExhaustedError, Drbg, LengthError

#: Largest number of generate calls between reseeds allowed by the standard.
MAX_RESEED_INTERVAL = 1 << 48

#: Number of generate calls between reseeds recommended by the standard.
NIST_RESEED_INTERVAL = 100_000


def _digest(hash_name: str, *parts: bytes) -> bytes:
    hasher = hashlib.new(hash_name)
    for part in parts:
        hasher.update(part)
    return hasher.digest()


def hash_df(hash_name: str, seed_material: Iterable[bytes], length: int) -> bytes:
    """Derive ``length`` bytes from the concatenated seed material (section 10.3.1)."""
    hash_size = hashlib.new(hash_name).digest_size
    if length > 255 * hash_size:
        raise LengthError(255 * hash_size, length)

    material = b"".join(seed_material)
    bits = (8 * length).to_bytes(4, "big")
    blocks = -(-length // hash_size)
    output = b"".join(
        _digest(hash_name, bytes([counter]), bits, material)
        for counter in range(1, blocks + 1)
    )
    return output[:length]


def _hashgen_blocks(hash_name: str, value: bytes) -> Iterator[bytes]:
    data = value
    while True:
        yield _digest(hash_name, data)
        data = increment(data)


def _hashgen(hash_name: str, value: bytes, length: int) -> bytes:
    """Produce ``length`` bytes by hashing successive counters from ``value`` (10.1.1.4)."""
    output = bytearray()
    blocks = _hashgen_blocks(hash_name, value)
    while len(output) < length:
        output += next(blocks)
    return bytes(output[:length])


class HashDrbg(Drbg):
    """Hash_DRBG over the hash named by ``hash_name`` with a seed of ``seedlen`` bytes."""

    hash_name: ClassVar[str]
    seedlen: ClassVar[int]

    def __init__(
        self, entropy: bytes, nonce: bytes, personalization_string: bytes = b""
    ) -> None:
        if not hasattr(type(self), "hash_name") or not hasattr(type(self), "seedlen"):
            raise TypeError(
                "HashDrbg needs a hash; use a subclass such as Sha256Drbg"
            )
        self._value = hash_df(
            self.hash_name,
            (bytes(entropy), bytes(nonce), bytes(personalization_string)),
            self.seedlen,
        )
        self._constant = hash_df(self.hash_name, (b"\x00", self._value), self.seedlen)
        self.reseed_counter = 1

    def reseed(self, entropy: bytes, additional_input: bytes = b"") -> None:
        """Mix fresh entropy and optional additional input into the state."""
        self._value = hash_df(
            self.hash_name,
            (b"\x01", self._value, bytes(entropy), bytes(additional_input)),
            self.seedlen,
        )
        self._constant = hash_df(self.hash_name, (b"\x00", self._value), self.seedlen)
        self.reseed_counter = 1

    def random_bytes(self, length: int, additional_input: bytes = b"") -> bytes:
        """Return ``length`` pseudorandom bytes."""
        if self.reseed_counter > NIST_RESEED_INTERVAL:
            raise CounterExhaustedError()

        if additional_input:
            w = _digest(self.hash_name, b"\x02", self._value, bytes(additional_input))
            self._value = add(self._value, w)

        output = _hashgen(self.hash_name, self._value, length)

        h = _digest(self.hash_name, b"\x03", self._value)
        value = add(self._value, h)
        value = add(value, self._constant)
        self._value = add(value, self.reseed_counter.to_bytes(8, "big"))
        self.reseed_counter += 1
        return output


class Sha1Drbg(HashDrbg):
    """Hash_DRBG with SHA-1."""

    hash_name = "sha1"
    seedlen = 440 // 8


class Sha224Drbg(HashDrbg):
    """Hash_DRBG with SHA-224."""

    hash_name = "sha224"
    seedlen = 440 // 8


class Sha512_224Drbg(HashDrbg):
    """Hash_DRBG with SHA-512/224."""

    hash_name = "sha512_224"
    seedlen = 440 // 8


class Sha256Drbg(HashDrbg):
    """Hash_DRBG with SHA-256."""

    hash_name = "sha256"
    seedlen = 440 // 8


class Sha512_256Drbg(HashDrbg):
    """Hash_DRBG with SHA-512/256."""

    hash_name = "sha512_256"
    seedlen = 440 // 8


class Sha384Drbg(HashDrbg):
    """Hash_DRBG with SHA-384."""

    hash_name = "sha384"
    seedlen = 888 // 8


class Sha512Drbg(HashDrbg):
    """Hash_DRBG with SHA-512."""

    hash_name = "sha512"
    seedlen = 888 // 8