"""Key derivation exports."""
from .derivation import (
    PUBLIC_KEY_BYTES,
    SECRET_KEY_BYTES,
    SEED_BYTES,
    derive_key_pair,
    generate_key_pair,
    generate_key_triad,
    generate_seed,
)

__all__ = [
    "PUBLIC_KEY_BYTES",
    "SECRET_KEY_BYTES",
    "SEED_BYTES",
    "derive_key_pair",
    "generate_key_pair",
    "generate_key_triad",
    "generate_seed",
]
