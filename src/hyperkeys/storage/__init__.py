"""Storage package exports."""
from .keystore import KeyStore
from .paths import PathResolver, base_name

__all__ = ["KeyStore", "PathResolver", "base_name"]
