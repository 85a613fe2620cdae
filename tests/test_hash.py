import pytest

from nistdrbg.errors import CounterExhaustedError, LengthError
from nistdrbg.hash import (
    NIST_RESEED_INTERVAL,
    HashDrbg,
    Sha1Drbg,
    Sha224Drbg,
    Sha256Drbg,
    Sha384Drbg,
    Sha512_224Drbg,
    Sha512_256Drbg,
    Sha512Drbg,
    hash_df,
)

ENTROPY = bytes.fromhex("136cf1c174e5a09f66b962d994396525")
NONCE = bytes.fromhex("fff1c6645f19231f")


def test_hash_known_answer():
    expected = bytes.fromhex(
        "0e28130fa5ca11edd3293ca26fdb8ae1810611f78715082ed3841e7486f16677"
        "b28e33ffe0b93d98ba57ba358c1343ab2a26b4eb7940f5bc639384641ee80a25"
        "140331076268bd1ce702ad534dda0ed8"
    )
    drbg = Sha1Drbg(ENTROPY, NONCE, b"")
    drbg.random_bytes(80)
    assert drbg.random_bytes(80) == expected


def test_hash_additional_input_known_answer():
    entropy = bytes.fromhex("c3ef82ce241f02e4298b118ca4f16225")
    nonce = bytes.fromhex("15e32abbae6b7433")
    add1 = bytes.fromhex("2b790052f09b364d4a8267a0a7de63b8")
    add2 = bytes.fromhex("2ee0819a671d07b5085cc46aa0e61b56")
    expected = bytes.fromhex(
        "5825fa1d1dc33c64cdc8690682eff06039e79508c3af48e880f8227d5f9aaa14"
        "b3bc76baee477ebbb5c45547134179223257525e8f3afefb78b59da032f1006d"
        "74c9831375a677eab3239c94ebe3f7fa"
    )
    drbg = Sha1Drbg(entropy, nonce, b"")
    drbg.random_bytes(80, add1)
    assert drbg.random_bytes(80, add2) == expected


def test_every_variant_gives_its_own_output():
    outputs = [
        Sha1Drbg(ENTROPY, NONCE).random_bytes(40),
        Sha224Drbg(ENTROPY, NONCE).random_bytes(40),
        Sha512_224Drbg(ENTROPY, NONCE).random_bytes(40),
        Sha256Drbg(ENTROPY, NONCE).random_bytes(40),
        Sha512_256Drbg(ENTROPY, NONCE).random_bytes(40),
        Sha384Drbg(ENTROPY, NONCE).random_bytes(40),
        Sha512Drbg(ENTROPY, NONCE).random_bytes(40),
    ]
    assert [len(out) for out in outputs] == [40] * 7
    assert len(set(outputs)) == 7


@pytest.mark.parametrize("personalization", [b"", b"ps", b"a longer personalization"])
def test_same_seed_same_output(personalization):
    first = Sha384Drbg(ENTROPY, NONCE, personalization)
    second = Sha384Drbg(ENTROPY, NONCE, personalization)
    assert first.random_bytes(100) == second.random_bytes(100)
    assert first.random_bytes(33, b"x") == second.random_bytes(33, b"x")


@pytest.mark.parametrize("length", [1, 10, 20, 55, 111])
def test_shorter_request_is_prefix_of_longer(length):
    short = Sha1Drbg(ENTROPY, NONCE).random_bytes(length)
    long = Sha1Drbg(ENTROPY, NONCE).random_bytes(150)
    assert len(long) == 150
    assert long[:length] == short

    short = Sha512Drbg(ENTROPY, NONCE).random_bytes(length)
    long = Sha512Drbg(ENTROPY, NONCE).random_bytes(150)
    assert long[:length] == short


def test_personalization_string_changes_output():
    plain = Sha224Drbg(ENTROPY, NONCE).random_bytes(32)
    personalized = Sha224Drbg(ENTROPY, NONCE, b"device").random_bytes(32)
    assert Sha224Drbg(ENTROPY, NONCE, b"device").random_bytes(32) == personalized
    assert len(personalized) == 32
    assert plain != personalized


def test_successive_outputs_differ():
    drbg = Sha256Drbg(ENTROPY, NONCE)
    first = drbg.random_bytes(32)
    second = drbg.random_bytes(32)
    replay = Sha256Drbg(ENTROPY, NONCE)
    assert replay.random_bytes(32) == first
    assert replay.random_bytes(32) == second
    assert first != second


def test_additional_input_changes_output():
    first = Sha256Drbg(ENTROPY, NONCE).random_bytes(32)
    second = Sha256Drbg(ENTROPY, NONCE).random_bytes(32, b"extra")
    assert Sha256Drbg(ENTROPY, NONCE).random_bytes(32, b"extra") == second
    assert first != second


def test_zero_length_request_returns_empty():
    drbg = Sha1Drbg(ENTROPY, NONCE)
    assert drbg.random_bytes(0) == b""
    assert drbg.reseed_counter == 2


def test_reseed_changes_output_and_resets_counter():
    reseeded = Sha256Drbg(ENTROPY, NONCE)
    untouched = Sha256Drbg(ENTROPY, NONCE)
    reseeded.random_bytes(16)
    untouched.random_bytes(16)
    assert reseeded.reseed_counter == 2
    reseeded.reseed(b"fresh entropy", b"more")
    assert reseeded.reseed_counter == 1
    assert reseeded.random_bytes(32) != untouched.random_bytes(32)


def test_reseed_with_and_without_additional_input_differ():
    a = Sha256Drbg(ENTROPY, NONCE)
    b = Sha256Drbg(ENTROPY, NONCE)
    a.reseed(b"fresh")
    b.reseed(b"fresh", b"more")
    assert a.random_bytes(32) != b.random_bytes(32)


def test_counter_exhaustion():
    drbg = Sha1Drbg(ENTROPY, NONCE)
    drbg.reseed_counter = NIST_RESEED_INTERVAL
    assert len(drbg.random_bytes(8)) == 8
    with pytest.raises(CounterExhaustedError):
        drbg.random_bytes(8)
    drbg.reseed(ENTROPY)
    assert len(drbg.random_bytes(8)) == 8


def test_hash_df_length_limit():
    with pytest.raises(LengthError) as info:
        hash_df("sha1", [b"seed"], 255 * 20 + 1)
    assert info.value.max_size == 255 * 20
    assert info.value.requested_size == 255 * 20 + 1


def test_hash_df_at_limit_has_requested_length():
    assert len(hash_df("sha1", [b"seed"], 255 * 20)) == 255 * 20


def test_hash_df_splits_are_equivalent():
    assert hash_df("sha256", [b"ab", b"cd"], 55) == hash_df("sha256", [b"abcd"], 55)


def test_base_class_needs_a_hash():
    with pytest.raises(TypeError):
        HashDrbg(ENTROPY, NONCE)