"""Store directory resolution and CLI configuration loading."""
from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Iterable, Iterator, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_DIRNAME = ".hyperkeys"
CONFIG_FILENAME = ".hyperkeys.yaml"

_default_dir: Optional[Path] = None


def default_store_dir() -> Path:
    return Path.home() / DEFAULT_DIRNAME


def get_default_dir() -> Optional[Path]:
    """Return the process-wide directory override, if one is set."""
    return _default_dir


def set_default_dir(path: Path | str) -> None:
    global _default_dir
    _default_dir = Path(path).expanduser()


def clear_default_dir() -> None:
    global _default_dir
    _default_dir = None


@contextlib.contextmanager
def default_dir(path: Path | str) -> Iterator[Path]:
    """Temporarily install a process-wide override, restoring the previous one on exit."""
    previous = _default_dir
    set_default_dir(path)
    try:
        yield resolve_store_dir()
    finally:
        if previous is None:
            clear_default_dir()
        else:
            set_default_dir(previous)


def resolve_store_dir(explicit: Path | str | None = None) -> Path:
    """Pick the store root: explicit override, then process-wide override, then ``~/.hyperkeys``."""
    if explicit:
        return Path(explicit).expanduser()
    if _default_dir is not None:
        return _default_dir
    return default_store_dir()


def ensure_store_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


class StoreConfig(BaseModel):
    dir: Optional[Path] = Field(default=None, description="Directory holding key artifacts")

    @field_validator("dir")
    @classmethod
    def _expand_dir(cls, value: Optional[Path]) -> Optional[Path]:
        if value is None:
            return None
        return value.expanduser()


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


__all__ = [
    "AppConfig",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "DEFAULT_DIRNAME",
    "LoggingConfig",
    "StoreConfig",
    "clear_default_dir",
    "default_dir",
    "default_store_dir",
    "ensure_store_dir",
    "get_default_dir",
    "load_config",
    "resolve_store_dir",
]
