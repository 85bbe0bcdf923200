"""Application configuration with per-profile files and environment overrides."""

from __future__ import annotations

import json
import os
import sys
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

ENV_PREFIX = "APP_"
ENV_SEPARATOR = "__"
DEFAULT_PROFILE = "release"


def _load_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a table")
    return data


_FILE_LOADERS: dict[str, Callable[[Path], dict[str, Any]]] = {
    ".toml": _load_toml,
    ".json": _load_json,
}

_TRUE_WORDS = {"true", "on", "yes", "1"}
_FALSE_WORDS = {"false", "off", "no", "0"}


class ConfigError(Exception):
    """Raised when configuration cannot be read or does not fit the schema."""


def _as_str(value: Any, key: str) -> str:
    if isinstance(value, (dict, list)):
        raise ConfigError(f"invalid type for {key!r}: expected a string")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"invalid type for {key!r}: expected a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise ConfigError(f"invalid type for {key!r}: expected a number, got {value!r}")


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ConfigError(f"invalid type for {key!r}: expected a boolean, got {value!r}")


def _require(table: Mapping[str, Any], key: str, path: str) -> Any:
    try:
        return table[key]
    except KeyError:
        raise ConfigError(f"missing field {path!r}") from None


@dataclass
class WindowConfig:
    """Window settings."""

    title: str
    width: float
    height: float
    fullscreen: bool
    resizable: bool
    decorated: bool
    vsync: bool

    @classmethod
    def _from_mapping(cls, table: Any) -> WindowConfig:
        if not isinstance(table, Mapping):
            raise ConfigError("invalid type for 'window': expected a table")

        def field_value(name: str, convert: Callable[[Any, str], Any]) -> Any:
            path = f"window.{name}"
            return convert(_require(table, name, path), path)

        return cls(
            title=field_value("title", _as_str),
            width=field_value("width", _as_float),
            height=field_value("height", _as_float),
            fullscreen=field_value("fullscreen", _as_bool),
            resizable=field_value("resizable", _as_bool),
            decorated=field_value("decorated", _as_bool),
            vsync=field_value("vsync", _as_bool),
        )


@dataclass
class AppConfig:
    """Application settings for one profile."""

    profile: str
    window: WindowConfig

    @classmethod
    def load(cls, profile: str) -> AppConfig:
        """Load a profile.

        Reads ``config/<profile>.toml`` (or ``.json``), looked for next to the
        running program first and then in the current directory; the file is
        optional. Environment variables prefixed ``APP_`` override it, with
        ``__`` separating nested keys (``APP_WINDOW__WIDTH=1920``). The profile
        name itself always wins.
        """
        config_dir = _find_config_dir() or Path("config")
        data = _read_profile_file(config_dir / profile)
        _merge_environment(data, os.environ)
        data["profile"] = profile
        return cls(
            profile=_as_str(_require(data, "profile", "profile"), "profile"),
            window=WindowConfig._from_mapping(_require(data, "window", "window")),
        )

    @classmethod
    def load_from_env(cls) -> AppConfig:
        """Load the profile named by ``APP_PROFILE``, defaulting to release."""
        return cls.load(os.environ.get("APP_PROFILE", DEFAULT_PROFILE))

    @classmethod
    def default(cls) -> AppConfig:
        """Load the release profile, or fall back to built-in settings."""
        try:
            return cls.load(DEFAULT_PROFILE)
        except ConfigError:
            return cls(
                profile=DEFAULT_PROFILE,
                window=WindowConfig(
                    title="Oil Pool Game",
                    width=800.0,
                    height=600.0,
                    fullscreen=False,
                    resizable=True,
                    decorated=True,
                    vsync=True,
                ),
            )


def _find_config_dir() -> Path | None:
    if sys.argv and sys.argv[0]:
        beside_program = Path(sys.argv[0]).resolve().parent / "config"
        if beside_program.exists():
            return beside_program
    cwd_config = Path("config")
    if cwd_config.exists():
        return cwd_config
    return None


def _read_profile_file(base: Path) -> dict[str, Any]:
    if base.suffix in _FILE_LOADERS and base.is_file():
        candidates = [base]
    else:
        candidates = [base.with_name(base.name + ext) for ext in _FILE_LOADERS]
    for candidate in candidates:
        if candidate.is_file():
            try:
                return _FILE_LOADERS[candidate.suffix](candidate)
            except (tomllib.TOMLDecodeError, json.JSONDecodeError, OSError) as exc:
                raise ConfigError(f"{candidate}: {exc}") from exc
    return {}


def _parse_env_value(raw: str) -> Any:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


def _merge_environment(data: dict[str, Any], environ: Mapping[str, str]) -> None:
    for name, raw in environ.items():
        if not name.upper().startswith(ENV_PREFIX):
            continue
        keys = name[len(ENV_PREFIX):].lower().split(ENV_SEPARATOR)
        if not all(keys):
            continue
        *parents, leaf = keys
        table = data
        for key in parents:
            child = table.get(key)
            if not isinstance(child, dict):
                child = {}
                table[key] = child
            table = child
        table[leaf] = _parse_env_value(raw)