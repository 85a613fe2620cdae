# nistdrbg

Deterministic random bit generators as specified in NIST SP 800-90A Rev. 1.
The package has three modules of generators:

- `nistdrbg.hash`: **Hash_DRBG**. The classes are `Sha1Drbg`, `Sha224Drbg`, `Sha512_224Drbg`,
  `Sha256Drbg`, `Sha512_256Drbg`, `Sha384Drbg` and `Sha512Drbg`.
- `nistdrbg.hmac_drbg`: **HMAC_DRBG**. The classes are `HmacSha1Drbg`, `HmacSha224Drbg`,
  `HmacSha512_224Drbg`, `HmacSha256Drbg`, `HmacSha512_256Drbg`, `HmacSha384Drbg` and
  `HmacSha512Drbg`.
- `nistdrbg.ctr`: **CTR_DRBG** over AES. The classes are `AesCtr128Drbg`, `AesCtr192Drbg` and
  `AesCtr256Drbg`. Each can be used with or without the block cipher derivation function.

Each generator is deterministic. The same entropy, nonce and personalization string always
give the same output. This makes the generators suitable for reproducing known-answer tests.
When they are seeded from a real entropy source, they can serve as a cryptographically secure
generator.

Every generator derives from the abstract class `nistdrbg.errors.Drbg` and has two methods:

- `reseed(entropy, additional_input=b"")`
- `random_bytes(length, additional_input=b"")`, which returns `bytes`

## Installation

```
pip install nistdrbg
```

CTR_DRBG takes its AES block cipher from the `cryptography` package. Hash_DRBG and HMAC_DRBG
use only `hashlib` and `hmac`.

## Usage

### Hash_DRBG and HMAC_DRBG

```python
from nistdrbg.hash import Sha256Drbg
from nistdrbg.hmac_drbg import HmacSha256Drbg

entropy = bytes.fromhex("136cf1c174e5a09f66b962d994396525")
nonce = bytes.fromhex("fff1c6645f19231f")

drbg = Sha256Drbg(entropy, nonce, b"my application")
block = drbg.random_bytes(32)

hmac_drbg = HmacSha256Drbg(entropy, nonce)
block = hmac_drbg.random_bytes(32, b"additional input")
```

The personalization string defaults to `b""`.

`nistdrbg.hash.hash_df(hash_name, seed_material, length)` exposes the Hash_df derivation
function. It takes a `hashlib` algorithm name and an iterable of byte strings. It raises
`LengthError` when `length` is more than 255 times the digest size.

### CTR_DRBG

Without a derivation function, the entropy is XORed into the personalization string. The
personalization string is first zero-padded to the seed length, which is the key length plus
16 bytes. The personalization string must not be longer than the seed length. The entropy
should be exactly the seed length: 32, 40 or 48 bytes for AES-128, AES-192 and AES-256.

```python
from nistdrbg.ctr import AesCtr128Drbg

entropy = bytes(32)  # 16-byte key + 16-byte block
drbg = AesCtr128Drbg(entropy, b"")
block = drbg.random_bytes(64)
```

With the derivation function, the entropy, nonce and personalization string may be of any
length:

```python
drbg = AesCtr128Drbg.with_df(entropy[:16], b"nonce123", b"personal")
block = drbg.random_bytes(64)
```

The `seedlen` property gives a CTR generator's seed length in bytes. The
`derivation_function` attribute tells whether the generator was made with `with_df`.

The base classes `HashDrbg`, `HmacDrbg` and `CtrDrbg` name no algorithm. Instantiating one of
them directly raises `TypeError`.

### Reseeding

Each generator can be given fresh entropy, with or without additional input:

```python
new_entropy = bytes(32)
drbg.reseed(new_entropy)
drbg.reseed(new_entropy, b"additional input")
```

CTR_DRBG without a derivation function has extra length rules:

- On reseed, the entropy must be exactly the seed length.
- Additional input, to `reseed` or to `random_bytes`, must be no longer than the seed length.

Any other length raises `LengthError`.

Each generator counts its requests since the last seeding in `reseed_counter`. Once that count
reaches a limit, `random_bytes` raises `CounterExhaustedError`. Reseed and carry on.

| Generator | Module constant | Value | Raises when |
|---|---|---|---|
| Hash_DRBG | `nistdrbg.hash.NIST_RESEED_INTERVAL` | 100 000 | the count is above this value |
| HMAC_DRBG | `nistdrbg.hmac_drbg.NIST_RESEED_INTERVAL_HMAC` | 10 000 | the count is above this value |
| CTR_DRBG | `nistdrbg.ctr.RESEED_INTERVAL` | 100 000 | the count reaches this value |

The upper bounds that the standard allows are recorded as `MAX_RESEED_INTERVAL` and
`MAX_RESEED_INTERVAL_HMAC`.

## Errors

All errors derive from `nistdrbg.errors.SeedError`:

- `LengthError`: an input or requested output has a length that is not allowed. It carries
  `max_size` and `requested_size`.
- `CounterExhaustedError`: the generator must be reseeded.
- `InsufficientEntropyError` and `EmptyNonceError`: these are defined for callers to use. The
  generators themselves do not raise them.

## What the package does not do

- It does not gather entropy itself. The caller supplies all entropy, nonces and
  personalization strings.
- It does not check how much entropy an input holds.
- It has no prediction-resistance mode. To get the same effect, call `reseed` before each
  `random_bytes`.
- CTR_DRBG is available over AES only. There is no Triple-DES variant.
- It has no command-line interface.

## Running the tests

```
pip install "nistdrbg[test]"
pytest
```