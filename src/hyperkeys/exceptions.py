"""Central exception hierarchy.

Filesystem failures are not wrapped; they surface as the built-in ``OSError``
subclasses raised by the underlying call.
"""
from __future__ import annotations

from pathlib import Path

from .models import ArtifactKind


class HyperkeysError(Exception):
    """Base exception for all key store failures"""


class NameRequired(HyperkeysError, ValueError):
    """Raised when a mutating operation receives an empty name"""

    def __init__(self) -> None:
        super().__init__("Name is required")


class ArtifactExists(HyperkeysError):
    """Raised by create when one of the artifacts for the name is already on disk"""

    def __init__(self, kind: ArtifactKind, path: Path) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"The {kind.value} key already exists ({path})")


class DerivationMismatch(HyperkeysError):
    """Raised when a stored key disagrees with the key derived from the stored seed"""

    def __init__(self, kind: ArtifactKind) -> None:
        self.kind = kind
        super().__init__(f"{kind.value} key from seed derivation is different")


class InvalidSeed(HyperkeysError, ValueError):
    """Raised when seed material has the wrong length"""


__all__ = [
    "ArtifactExists",
    "DerivationMismatch",
    "HyperkeysError",
    "InvalidSeed",
    "NameRequired",
]
