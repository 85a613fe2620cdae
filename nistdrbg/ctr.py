"""CTR_DRBG from NIST SP 800-90A Rev. 1, section 10.2, over AES."""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .arithmetic import increment
from .errors import CounterExhaustedError, Drbg, LengthError

#: Number of generate calls allowed before a reseed is required.
RESEED_INTERVAL = 100_000

_BLOCK_LEN = 16


def _encrypt(key: bytes, data: bytes) -> bytes:
    """Encrypt whole blocks of ``data`` independently under ``key``."""
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def _xor(a: bytes, b: bytes) -> bytes:
    """XOR ``b`` into the leading bytes of ``a``; the result has the length of ``a``."""
    mixed = bytes(x ^ y for x, y in zip(a, b))
    return mixed + a[len(mixed):]


def _pad(data: bytes, length: int) -> bytes:
    """Right-pad ``data`` with zeros to ``length`` bytes, rejecting longer input."""
    if len(data) > length:
        raise LengthError(length, len(data))
    return data + bytes(length - len(data))


def _counter_blocks(value: bytes, count: int) -> tuple[bytes, bytes]:
    """Return ``count`` successive incremented values and the last value reached."""
    blocks = bytearray()
    for _ in range(count):
        value = increment(value)
        blocks += value
    return bytes(blocks), value


def _bcc(key: bytes, iv: bytes, data: bytes, seedlen: int) -> bytes:
    """The BCC function over ``IV || L || N || data || 0x80 || 0x00...``."""
    s = len(data).to_bytes(4, "big") + seedlen.to_bytes(4, "big") + data + b"\x80"
    s += bytes(-len(s) % _BLOCK_LEN)
    chaining = _encrypt(key, iv)
    for start in range(0, len(s), _BLOCK_LEN):
        chaining = _encrypt(key, _xor(chaining, s[start:start + _BLOCK_LEN]))
    return chaining


def _block_cipher_df(
    key_len: int, seedlen: int, seed_material: Iterable[bytes]
) -> bytes:
    """Block_Cipher_df (section 10.3.2) producing ``seedlen`` bytes."""
    data = b"".join(seed_material)
    blocks = -(-seedlen // _BLOCK_LEN)

    df_key = bytes(range(key_len))
    temp = b"".join(
        _bcc(df_key, i.to_bytes(4, "big") + bytes(_BLOCK_LEN - 4), data, seedlen)
        for i in range(blocks)
    )[:seedlen]

    new_key = temp[:key_len]
    x = temp[key_len:key_len + _BLOCK_LEN]
    output = bytearray()
    for _ in range(blocks):
        x = _encrypt(new_key, x)
        output += x
    return bytes(output[:seedlen])


class CtrDrbg(Drbg):
    """CTR_DRBG over AES with a key of ``key_len`` bytes."""

    key_len: ClassVar[int]

    def __init__(self, entropy: bytes, personalization_string: bytes = b"") -> None:
        """Instantiate without a derivation function."""
        self._instantiate(bytes(entropy), None, bytes(personalization_string))

    @classmethod
    def with_df(
        cls, entropy: bytes, nonce: bytes, personalization_string: bytes = b""
    ) -> CtrDrbg:
        """Instantiate using the block cipher derivation function."""
        drbg = cls.__new__(cls)
        drbg._instantiate(bytes(entropy), bytes(nonce), bytes(personalization_string))
        return drbg

    @property
    def seedlen(self) -> int:
        return self.key_len + _BLOCK_LEN

    def _instantiate(
        self, entropy: bytes, nonce: bytes | None, personalization_string: bytes
    ) -> None:
        if not hasattr(type(self), "key_len"):
            raise TypeError(
                "CtrDrbg needs a key length; use a subclass such as AesCtr256Drbg"
            )
        seedlen = self.seedlen
        if len(personalization_string) > seedlen:
            raise LengthError(seedlen, len(personalization_string))

        self.derivation_function = nonce is not None
        if nonce is not None:
            seed_material = _block_cipher_df(
                self.key_len, seedlen, (entropy, nonce, personalization_string)
            )
        else:
            seed_material = _xor(_pad(personalization_string, seedlen), entropy)

        self._key = bytes(self.key_len)
        self._value = bytes(_BLOCK_LEN)
        self.reseed_counter = 1
        self._update(seed_material)

    def _update(self, provided_data: bytes) -> None:
        """The CTR_DRBG update function (section 10.2.1.2)."""
        seedlen = self.seedlen
        blocks = -(-seedlen // _BLOCK_LEN)
        counters, self._value = _counter_blocks(self._value, blocks)
        temp = _xor(_encrypt(self._key, counters)[:seedlen], provided_data)
        self._key = temp[:self.key_len]
        self._value = temp[self.key_len:]

    def reseed(self, entropy: bytes, additional_input: bytes = b"") -> None:
        """Mix fresh entropy and optional additional input into the state."""
        entropy = bytes(entropy)
        additional_input = bytes(additional_input)
        seedlen = self.seedlen
        if self.derivation_function:
            seed_material = _block_cipher_df(
                self.key_len, seedlen, (entropy, additional_input)
            )
        else:
            if len(entropy) != seedlen:
                raise LengthError(seedlen, len(entropy))
            seed_material = _xor(_pad(additional_input, seedlen), entropy)
        self._update(seed_material)
        self.reseed_counter = 1

    def random_bytes(self, length: int, additional_input: bytes = b"") -> bytes:
        """Return ``length`` pseudorandom bytes."""
        if self.reseed_counter >= RESEED_INTERVAL:
            raise CounterExhaustedError()

        seedlen = self.seedlen
        additional_input = bytes(additional_input)
        seed_material = bytes(seedlen)
        if additional_input:
            if self.derivation_function:
                seed_material = _block_cipher_df(
                    self.key_len, seedlen, (additional_input,)
                )
            else:
                seed_material = _pad(additional_input, seedlen)
            self._update(seed_material)

        blocks = -(-length // _BLOCK_LEN)
        counters, self._value = _counter_blocks(self._value, blocks)
        output = _encrypt(self._key, counters)[:length]

        self._update(seed_material)
        self.reseed_counter += 1
        return output


class AesCtr128Drbg(CtrDrbg):
    """CTR_DRBG with AES-128."""

    key_len = 16


class AesCtr192Drbg(CtrDrbg):
    """CTR_DRBG with AES-192."""

    key_len = 24


class AesCtr256Drbg(CtrDrbg):
    """CTR_DRBG with AES-256."""

    key_len = 32