# Ed25519 seed generation and seed-to-key-pair derivation.
from __future__ import annotations

import os

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from ..exceptions import InvalidSeed
from ..models import KeyPair, KeyTriad

SEED_BYTES = 32
PUBLIC_KEY_BYTES = 32
SECRET_KEY_BYTES = 64


def generate_seed() -> bytes:
    return os.urandom(SEED_BYTES)


def derive_key_pair(seed: bytes) -> KeyPair:
    """Deterministically derive the Ed25519 key pair for ``seed``.

    The secret key follows the libsodium layout (seed followed by the public
    key) so files stay interchangeable with ``crypto_sign_seed_keypair``.
    """
    if len(seed) != SEED_BYTES:
        raise InvalidSeed(f"Seed must be {SEED_BYTES} bytes, got {len(seed)}")
    private = Ed25519PrivateKey.from_private_bytes(bytes(seed))
    return _pair_from_private(private)


def generate_key_pair() -> KeyPair:
    return _pair_from_private(Ed25519PrivateKey.generate())


def generate_key_triad(seed: bytes | None = None) -> KeyTriad:
    seed = seed if seed is not None else generate_seed()
    pair = derive_key_pair(seed)
    return KeyTriad(public_key=pair.public_key, secret_key=pair.secret_key, seed_key=bytes(seed))


def _pair_from_private(private: Ed25519PrivateKey) -> KeyPair:
    seed = private.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public = private.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return KeyPair(public_key=public, secret_key=seed + public)
