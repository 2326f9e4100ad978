"""Typer-based command line interface for hyperkeys."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
import typer

from ..config import ensure_store_dir, load_config, resolve_store_dir
from ..crypto import generate_key_triad
from ..exceptions import HyperkeysError
from ..logging import configure_logging
from ..models import ArtifactPaths, KeyEntry, KeyMaterial, KeyTriad
from ..storage import KeyStore

app = typer.Typer(help="Manage a directory of Ed25519 seeds and key pairs")


@app.callback()
def main(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Option(
        None, "--dir", envvar="HYPERKEYS_DIR", metavar="PATH", help="Key store directory"
    ),
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH"),
    log_level: Optional[str] = typer.Option(None, "--log-level", envvar="HYPERKEYS_LOG_LEVEL"),
) -> None:
    try:
        app_config = load_config(config)
    except (OSError, ValueError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(log_level or app_config.logging.normalized_level())
    ctx.obj = resolve_store_dir(directory or app_config.store.dir)


def _store(create_dir: bool = False) -> KeyStore:
    root: Path = click.get_current_context().obj
    if create_dir:
        ensure_store_dir(root)
    return KeyStore(root)


def _parse_hex(value: Optional[str]) -> Optional[bytes]:
    if value is None:
        return None
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise typer.BadParameter(f"not a hex string: {value!r}") from exc


def _hex(value: Optional[bytes]) -> Optional[str]:
    return value.hex() if value is not None else None


def _render_keys(keys: KeyMaterial | KeyEntry | KeyTriad, name: Optional[str] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    if name is not None:
        payload["name"] = name
    payload["public_key"] = _hex(keys.public_key)
    payload["secret_key"] = _hex(keys.secret_key)
    payload["seed_key"] = _hex(keys.seed_key)
    return payload


def _render_paths(paths: ArtifactPaths) -> Dict[str, Optional[str]]:
    return {
        "public_key": str(paths.public_key) if paths.public_key else None,
        "secret_key": str(paths.secret_key) if paths.secret_key else None,
        "seed_key": str(paths.seed_key) if paths.seed_key else None,
    }


def _emit(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"error: {exc}", err=True)
    return typer.Exit(code=2)


@app.command()
def create(name: str = typer.Argument(..., help="Entry name")) -> None:
    """Generate a new seed for NAME."""
    try:
        seed = _store(create_dir=True).create(name)
    except (HyperkeysError, OSError) as exc:
        raise _fail(exc) from exc
    _emit({"name": name, "seed_key": seed.hex()})


@app.command()
def get(names: List[str] = typer.Argument(..., help="One or more entry names")) -> None:
    """Show the keys stored or derivable for each NAME."""
    try:
        results = _store().get(names)
    except (HyperkeysError, OSError) as exc:
        raise _fail(exc) from exc
    rendered = [_render_keys(keys, name) for name, keys in zip(names, results)]
    _emit(rendered[0] if len(rendered) == 1 else rendered)


@app.command("set")
def set_keys(
    name: str = typer.Argument(..., help="Entry name"),
    public_key: Optional[str] = typer.Option(None, "--public-key", help="Public key as hex"),
    secret_key: Optional[str] = typer.Option(None, "--secret-key", help="Secret key as hex"),
    seed_key: Optional[str] = typer.Option(None, "--seed-key", help="Seed as hex"),
) -> None:
    """Overwrite the given artifacts for NAME."""
    try:
        _store(create_dir=True).set(
            name,
            public_key=_parse_hex(public_key),
            secret_key=_parse_hex(secret_key),
            seed_key=_parse_hex(seed_key),
        )
    except (HyperkeysError, OSError) as exc:
        raise _fail(exc) from exc


@app.command()
def exists(name: str = typer.Argument(..., help="Entry name")) -> None:
    """Print artifact paths for NAME; exit 1 when there are none."""
    try:
        found = _store().exists(name)
    except OSError as exc:
        raise _fail(exc) from exc
    _emit(_render_paths(found))
    if not found:
        raise typer.Exit(code=1)


@app.command()
def remove(name: str = typer.Argument(..., help="Entry name")) -> None:
    """Delete every artifact stored for NAME."""
    try:
        removed = _store().remove(name)
    except OSError as exc:
        raise _fail(exc) from exc
    _emit(_render_paths(removed))


@app.command("list")
def list_keys() -> None:
    """List key pairs and known public keys."""
    store = _store()
    if not store.dir.is_dir():
        _emit({"key_pairs": [], "known_keys": []})
        return
    try:
        listing = store.list()
    except (HyperkeysError, OSError) as exc:
        raise _fail(exc) from exc
    _emit(
        {
            "key_pairs": [_render_keys(entry, entry.name) for entry in listing.key_pairs],
            "known_keys": [_render_keys(entry, entry.name) for entry in listing.known_keys],
        }
    )


@app.command()
def generate(
    seed_key: Optional[str] = typer.Option(None, "--seed-key", help="Derive from this hex seed"),
) -> None:
    """Print a key triad without touching the store."""
    try:
        triad = generate_key_triad(_parse_hex(seed_key))
    except HyperkeysError as exc:
        raise _fail(exc) from exc
    _emit(_render_keys(triad))


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"hyperkeys {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
