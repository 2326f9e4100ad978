from pathlib import Path

import pytest

from hyperkeys.models import ArtifactKind
from hyperkeys.storage import PathResolver, base_name


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("alice", "alice"),
        ("alice.pub", "alice"),
        ("alice.sec", "alice"),
        ("alice.txt", "alice.txt"),
        ("alice.pub.sec", "alice.pub"),
    ],
)
def test_base_name(filename: str, expected: str) -> None:
    assert base_name(filename) == expected


def test_artifact_naming(tmp_path: Path) -> None:
    resolver = PathResolver(tmp_path)
    assert resolver.artifact("bob", ArtifactKind.SEED) == tmp_path / "bob"
    assert resolver.artifact("bob", ArtifactKind.PUBLIC) == tmp_path / "bob.pub"
    assert resolver.artifact("bob", ArtifactKind.SECRET) == tmp_path / "bob.sec"
    assert list(resolver.artifacts("bob")) == [ArtifactKind.PUBLIC, ArtifactKind.SECRET, ArtifactKind.SEED]


def test_base_names_deduplicates_and_skips_directories(tmp_path: Path) -> None:
    for filename in ("b.sec", "a", "a.pub", "b.pub", "c.pub"):
        (tmp_path / filename).write_bytes(b"x")
    (tmp_path / "nested").mkdir()
    assert list(PathResolver(tmp_path).base_names()) == ["a", "b", "c"]
