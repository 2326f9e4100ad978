"""Directory-backed store of Ed25519 seeds and key pairs."""
from .config import clear_default_dir, default_dir, resolve_store_dir, set_default_dir
from .crypto import derive_key_pair, generate_key_pair, generate_key_triad, generate_seed
from .exceptions import ArtifactExists, DerivationMismatch, HyperkeysError, InvalidSeed, NameRequired
from .logging import configure_logging
from .models import ArtifactKind, ArtifactPaths, KeyEntry, KeyListing, KeyMaterial, KeyPair, KeyTriad
from .storage import KeyStore
from .version import __version__

__all__ = [
    "ArtifactExists",
    "ArtifactKind",
    "ArtifactPaths",
    "DerivationMismatch",
    "HyperkeysError",
    "InvalidSeed",
    "KeyEntry",
    "KeyListing",
    "KeyMaterial",
    "KeyPair",
    "KeyStore",
    "KeyTriad",
    "NameRequired",
    "__version__",
    "clear_default_dir",
    "configure_logging",
    "default_dir",
    "derive_key_pair",
    "generate_key_pair",
    "generate_key_triad",
    "generate_seed",
    "resolve_store_dir",
    "set_default_dir",
]
