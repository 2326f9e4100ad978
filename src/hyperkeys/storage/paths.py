# Map entry names to artifact files and back.
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterator, List

from ..models import ArtifactKind


class PathResolver:
  """Compute artifact paths under the store root.

  For a base name ``N`` the seed lives in ``N``, the public key in ``N.pub``
  and the secret key in ``N.sec``.
  """
  def __init__(self, root: Path):
    self.root = root

  def artifact(self, name: str, kind: ArtifactKind) -> Path:
    return self.root / f"{name}{kind.suffix}"

  def artifacts(self, name: str) -> Dict[ArtifactKind, Path]:
    return {kind: self.artifact(name, kind) for kind in ArtifactKind}

  def files(self) -> List[str]:
    with os.scandir(self.root) as entries:
      return sorted(entry.name for entry in entries if not entry.is_dir())

  def base_names(self) -> Iterator[str]:
    """Yield each distinct entry name once, in first-seen order."""
    seen = set()
    for filename in self.files():
      name = base_name(filename)
      if name in seen:
        continue
      seen.add(name)
      yield name


def base_name(filename: str) -> str:
  for kind in (ArtifactKind.PUBLIC, ArtifactKind.SECRET):
    if filename.endswith(kind.suffix):
      return filename[: -len(kind.suffix)]
  return filename


__all__ = ["PathResolver", "base_name"]
