import pytest

from hyperkeys.crypto import (
    PUBLIC_KEY_BYTES,
    SECRET_KEY_BYTES,
    SEED_BYTES,
    derive_key_pair,
    generate_key_pair,
    generate_key_triad,
    generate_seed,
)
from hyperkeys.exceptions import InvalidSeed

# RFC 8032, section 7.1, TEST 1
RFC8032_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")


def test_generate_seed_length_and_freshness() -> None:
    first = generate_seed()
    second = generate_seed()
    assert len(first) == SEED_BYTES
    assert first != second


def test_derive_matches_rfc8032_vector() -> None:
    pair = derive_key_pair(RFC8032_SEED)
    assert pair.public_key == RFC8032_PUBLIC
    assert pair.secret_key == RFC8032_SEED + RFC8032_PUBLIC


def test_derive_is_deterministic() -> None:
    seed = generate_seed()
    assert derive_key_pair(seed) == derive_key_pair(seed)


@pytest.mark.parametrize("size", [0, 16, 31, 33, 64])
def test_derive_rejects_wrong_seed_length(size: int) -> None:
    with pytest.raises(InvalidSeed):
        derive_key_pair(b"\x01" * size)


def test_generate_key_pair_sizes() -> None:
    pair = generate_key_pair()
    assert len(pair.public_key) == PUBLIC_KEY_BYTES
    assert len(pair.secret_key) == SECRET_KEY_BYTES
    assert pair.secret_key[SEED_BYTES:] == pair.public_key
    assert generate_key_pair() != pair


def test_generate_key_triad_without_seed() -> None:
    triad = generate_key_triad()
    assert len(triad.seed_key) == SEED_BYTES
    assert triad.key_pair == derive_key_pair(triad.seed_key)


def test_generate_key_triad_with_seed() -> None:
    triad = generate_key_triad(RFC8032_SEED)
    assert triad.seed_key == RFC8032_SEED
    assert triad.public_key == RFC8032_PUBLIC
