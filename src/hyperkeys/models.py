"""Typed records for key material and on-disk artifacts."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple


class ArtifactKind(str, Enum):
    """One of the three files a named entry may own.

    Member order is the order in which conflicts are checked.
    """

    PUBLIC = "public"
    SECRET = "secret"
    SEED = "seed"

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @property
    def field_name(self) -> str:
        return f"{self.value}_key"


_SUFFIXES = {
    ArtifactKind.PUBLIC: ".pub",
    ArtifactKind.SECRET: ".sec",
    ArtifactKind.SEED: "",
}


@dataclass(frozen=True, slots=True)
class KeyPair:
    public_key: bytes
    secret_key: bytes


@dataclass(frozen=True, slots=True)
class KeyTriad:
    public_key: bytes
    secret_key: bytes
    seed_key: bytes

    @property
    def key_pair(self) -> KeyPair:
        return KeyPair(public_key=self.public_key, secret_key=self.secret_key)


@dataclass(frozen=True, slots=True)
class ArtifactPaths:
    """Result of probing a name: the path of each present artifact, ``None`` otherwise."""

    public_key: Optional[Path] = None
    secret_key: Optional[Path] = None
    seed_key: Optional[Path] = None

    def get(self, kind: ArtifactKind) -> Optional[Path]:
        return getattr(self, kind.field_name)

    @property
    def present(self) -> Iterator[Tuple[ArtifactKind, Path]]:
        for kind in ArtifactKind:
            path = self.get(kind)
            if path is not None:
                yield kind, path

    def __bool__(self) -> bool:
        return any(True for _ in self.present)


@dataclass(frozen=True, slots=True)
class KeyMaterial:
    """Resolved key bytes for a name. ``None`` means the slot is absent."""

    public_key: Optional[bytes] = None
    secret_key: Optional[bytes] = None
    seed_key: Optional[bytes] = None

    @property
    def has_key_pair(self) -> bool:
        return self.public_key is not None and self.secret_key is not None

    @property
    def is_known_key(self) -> bool:
        # Someone else's identity: a public key with no local signing material.
        return self.public_key is not None and self.secret_key is None and self.seed_key is None


@dataclass(frozen=True, slots=True)
class KeyEntry:
    name: str
    public_key: Optional[bytes] = None
    secret_key: Optional[bytes] = None
    seed_key: Optional[bytes] = None

    @classmethod
    def from_material(cls, name: str, material: KeyMaterial) -> KeyEntry:
        return cls(
            name=name,
            public_key=material.public_key,
            secret_key=material.secret_key,
            seed_key=material.seed_key,
        )


@dataclass(slots=True)
class KeyListing:
    key_pairs: List[KeyEntry] = field(default_factory=list)
    known_keys: List[KeyEntry] = field(default_factory=list)


__all__ = [
    "ArtifactKind",
    "ArtifactPaths",
    "KeyEntry",
    "KeyListing",
    "KeyMaterial",
    "KeyPair",
    "KeyTriad",
]
