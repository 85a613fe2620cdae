"""HMAC_DRBG from NIST SP 800-90A Rev. 1, section 10.1.2."""

from __future__ import annotations

import hashlib
import hmac
from typing import ClassVar

from .errors import CounterExhaustedError, Drbg

#: Largest number of generate calls between reseeds allowed by the standard.
MAX_RESEED_INTERVAL_HMAC = 1 << 48

#: Number of generate calls between reseeds recommended by the standard.
NIST_RESEED_INTERVAL_HMAC = 10_000


class HmacDrbg(Drbg):
    """HMAC_DRBG over the hash named by ``hash_name``."""

    hash_name: ClassVar[str]

    def __init__(
        self, entropy: bytes, nonce: bytes, personalization_string: bytes = b""
    ) -> None:
        if not hasattr(type(self), "hash_name"):
            raise TypeError(
                "HmacDrbg needs a hash; use a subclass such as HmacSha256Drbg"
            )
        out_len = hashlib.new(self.hash_name).digest_size
        self._key = bytes(out_len)
        self._value = b"\x01" * out_len
        self.reseed_counter = 1
        self._update(bytes(entropy), bytes(nonce), bytes(personalization_string))

    def _mac(self, *parts: bytes) -> bytes:
        return hmac.digest(self._key, b"".join(parts), self.hash_name)

    def _update(self, *provided_data: bytes) -> None:
        """The HMAC_DRBG update function (section 10.1.2.2)."""
        data = b"".join(provided_data)
        self._key = self._mac(self._value, b"\x00", data)
        self._value = self._mac(self._value)
        if not data:
            return
        self._key = self._mac(self._value, b"\x01", data)
        self._value = self._mac(self._value)

    def reseed(self, entropy: bytes, additional_input: bytes = b"") -> None:
        """Mix fresh entropy and optional additional input into the state."""
        self._update(bytes(entropy), bytes(additional_input))
        self.reseed_counter = 1

    def random_bytes(self, length: int, additional_input: bytes = b"") -> bytes:
        """Return ``length`` pseudorandom bytes."""
        if self.reseed_counter > NIST_RESEED_INTERVAL_HMAC:
            raise CounterExhaustedError()

        additional_input = bytes(additional_input)
        if additional_input:
            self._update(additional_input)

        output = bytearray()
        while len(output) < length:
            self._value = self._mac(self._value)
            output += self._value

        self._update(additional_input)
        self.reseed_counter += 1
        return bytes(output[:length])


class HmacSha1Drbg(HmacDrbg):
    """HMAC_DRBG with SHA-1."""

    hash_name = "sha1"


class HmacSha224Drbg(HmacDrbg):
    """HMAC_DRBG with SHA-224."""

    hash_name = "sha224"


class HmacSha512_224Drbg(HmacDrbg):
    """HMAC_DRBG with SHA-512/224."""

    hash_name = "sha512_224"


class HmacSha256Drbg(HmacDrbg):
    """HMAC_DRBG with SHA-256."""

    hash_name = "sha256"


class HmacSha512_256Drbg(HmacDrbg):
    """HMAC_DRBG with SHA-512/256."""

    hash_name = "sha512_256"


class HmacSha384Drbg(HmacDrbg):
    """HMAC_DRBG with SHA-384."""

    hash_name = "sha384"


class HmacSha512Drbg(HmacDrbg):
    """HMAC_DRBG with SHA-512."""

    hash_name = "sha512"