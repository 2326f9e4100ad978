from __future__ import annotations

import hmac
from pathlib import Path
from typing import List, Optional, Sequence, Union, overload

from ..config import resolve_store_dir
from ..crypto.derivation import derive_key_pair, generate_seed
from ..exceptions import ArtifactExists, DerivationMismatch, NameRequired
from ..logging import get_logger
from ..models import (
    ArtifactKind,
    ArtifactPaths,
    KeyEntry,
    KeyListing,
    KeyMaterial,
    KeyPair,
    KeyTriad,
)
from .paths import PathResolver

logger = get_logger(__name__)


class KeyStore:
    """Filesystem-backed store of Ed25519 key material, keyed by name.

    Layout (flat, under the root directory):
      - <name>      32-byte seed
      - <name>.pub  32-byte public key
      - <name>.sec  64-byte secret key

    Any subset of the three files may exist. Consistency between them is
    checked when reading, never when writing. The root directory must already
    exist.
    """

    def __init__(self, root: Optional[Path | str] = None) -> None:
        self._paths = PathResolver(resolve_store_dir(root))

    @property
    def dir(self) -> Path:
        return self._paths.root

    def exists(self, name: str) -> ArtifactPaths:
        if not name:
            return ArtifactPaths()
        found = {
            kind.field_name: path if path.exists() else None
            for kind, path in self._paths.artifacts(name).items()
        }
        return ArtifactPaths(**found)

    def create(self, name: str) -> bytes:
        if not name:
            raise NameRequired()

        conflict = next(self.exists(name).present, None)
        if conflict is not None:
            raise ArtifactExists(*conflict)

        seed = generate_seed()
        # "xb" fails with FileExistsError if another writer got there first.
        with self._paths.artifact(name, ArtifactKind.SEED).open("xb") as handle:
            handle.write(seed)
        logger.info("keystore.key.created", name=name)
        return seed

    @overload
    def get(self, name: str) -> KeyMaterial: ...

    @overload
    def get(self, name: Sequence[str]) -> List[KeyMaterial]: ...

    def get(self, name: Union[str, Sequence[str]]) -> Union[KeyMaterial, List[KeyMaterial]]:
        if isinstance(name, (list, tuple)):
            return [self._read(item) for item in name]
        return self._read(name)

    def set(
        self,
        name: str,
        *,
        public_key: Optional[bytes] = None,
        secret_key: Optional[bytes] = None,
        seed_key: Optional[bytes] = None,
    ) -> None:
        if not name:
            raise NameRequired()

        values = {
            ArtifactKind.PUBLIC: public_key,
            ArtifactKind.SECRET: secret_key,
            ArtifactKind.SEED: seed_key,
        }
        written = []
        for kind, value in values.items():
            if value is None:
                continue
            self._paths.artifact(name, kind).write_bytes(value)
            written.append(kind.value)
        logger.debug("keystore.key.written", name=name, artifacts=written)

    def set_keys(self, name: str, keys: KeyPair | KeyTriad | KeyMaterial | KeyEntry) -> None:
        """Store every slot present on ``keys``, e.g. the result of ``get`` or a generated triad."""
        self.set(
            name,
            public_key=keys.public_key,
            secret_key=keys.secret_key,
            seed_key=getattr(keys, "seed_key", None),
        )

    def remove(self, name: str) -> ArtifactPaths:
        """Delete whichever artifacts exist for ``name`` and return their paths."""
        found = self.exists(name)
        for _kind, path in found.present:
            path.unlink(missing_ok=True)
        if found:
            logger.info("keystore.key.removed", name=name, artifacts=[kind.value for kind, _ in found.present])
        return found

    def list(self) -> KeyListing:
        listing = KeyListing()
        for name in self._paths.base_names():
            material = self._read(name)
            if material.has_key_pair:
                listing.key_pairs.append(KeyEntry.from_material(name, material))
            elif material.is_known_key:
                listing.known_keys.append(KeyEntry.from_material(name, material))
        logger.debug(
            "keystore.listed",
            key_pairs=len(listing.key_pairs),
            known_keys=len(listing.known_keys),
        )
        return listing

    def _read(self, name: str) -> KeyMaterial:
        found = self.exists(name)
        loaded = {kind: path.read_bytes() for kind, path in found.present}
        public_key = loaded.get(ArtifactKind.PUBLIC)
        secret_key = loaded.get(ArtifactKind.SECRET)
        seed_key = loaded.get(ArtifactKind.SEED)

        if seed_key is not None:
            derived = derive_key_pair(seed_key)
            public_key = _check_derived(name, ArtifactKind.PUBLIC, public_key, derived.public_key)
            secret_key = _check_derived(name, ArtifactKind.SECRET, secret_key, derived.secret_key)

        return KeyMaterial(public_key=public_key, secret_key=secret_key, seed_key=seed_key)


def _check_derived(name: str, kind: ArtifactKind, stored: Optional[bytes], derived: bytes) -> bytes:
    if stored is None:
        return derived
    if not hmac.compare_digest(stored, derived):
        logger.warning("keystore.derivation.mismatch", name=name, artifact=kind.value)
        raise DerivationMismatch(kind)
    return stored


__all__ = ["KeyStore"]
