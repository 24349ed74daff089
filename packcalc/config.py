"""Application settings from a YAML file, environment variables and defaults."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_PACK_SIZES",
    "DEFAULT_PORT",
    "DEFAULT_SEARCH_PATHS",
    "load_config",
    "normalize_port",
    "parse_pack_sizes",
]

log = logging.getLogger(__name__)

DEFAULT_PORT = ":3000"
DEFAULT_PACK_SIZES: tuple[int, ...] = (250, 500, 1000, 2000, 5000)
DEFAULT_SEARCH_PATHS: tuple[str, ...] = (".", "/root")

_DEFAULT_PACK_SIZES_TEXT = ",".join(str(size) for size in DEFAULT_PACK_SIZES)
_CONFIG_FILE_NAMES = ("config.yaml", "config.yml", "config")
_ENV_KEYS = (("port", "PORT"), ("pack_sizes", "PACK_SIZES"))
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ConfigError(Exception):
    """The configuration file exists but cannot be used."""


@dataclass
class Config:
    """Settings the server starts with."""

    port: str = DEFAULT_PORT
    pack_sizes: list[int] = field(default_factory=lambda: list(DEFAULT_PACK_SIZES))


def normalize_port(port: str) -> str:
    """Turn a bare port number such as ``3000`` into a listen address ``:3000``."""
    return f":{port}" if _INTEGER.fullmatch(port) else port


def parse_pack_sizes(text: str) -> list[int]:
    """Parse comma-separated pack sizes, dropping blanks and non-positive or invalid entries."""
    sizes: list[int] = []
    for raw in text.split(","):
        item = raw.strip()
        if not item:
            continue
        if _INTEGER.fullmatch(item) and int(item) > 0:
            sizes.append(int(item))
        else:
            log.info("Skipping invalid pack size: %s", item)
    return sizes


def _find_config_file(search_paths: Iterable[str | os.PathLike[str]]) -> Path | None:
    for directory in search_paths:
        for name in _CONFIG_FILE_NAMES:
            candidate = Path(directory) / name
            if candidate.is_file():
                return candidate
    return None


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read configuration file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"configuration file {path} does not hold a mapping")
    return {str(key).lower(): value for key, value in data.items()}


def _as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_as_string(item) for item in value)
    return str(value)


def load_config(
    search_paths: Iterable[str | os.PathLike[str]] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load settings; environment variables win over the file, the file over defaults."""
    if search_paths is None:
        search_paths = DEFAULT_SEARCH_PATHS
    if environ is None:
        environ = os.environ

    settings: dict[str, Any] = {"port": DEFAULT_PORT, "pack_sizes": _DEFAULT_PACK_SIZES_TEXT}

    path = _find_config_file(search_paths)
    if path is None:
        log.info("Config file not found; falling back to environment variables or defaults")
    else:
        file_settings = _read_config_file(path)
        for key, _ in _ENV_KEYS:
            if key in file_settings:
                settings[key] = file_settings[key]
        log.info("Loaded configuration from file: %s", path)

    for key, variable in _ENV_KEYS:
        value = environ.get(variable)
        if value:
            settings[key] = value

    port = normalize_port(_as_string(settings["port"]))
    log.info("Using port: %s", port)

    raw_sizes = _as_string(settings["pack_sizes"])
    log.info("Raw pack sizes from config: %s", raw_sizes)
    pack_sizes = parse_pack_sizes(raw_sizes)
    if not pack_sizes:
        log.info("No valid pack sizes found; using default pack sizes: %s", _DEFAULT_PACK_SIZES_TEXT)
        pack_sizes = list(DEFAULT_PACK_SIZES)
    else:
        log.info("Loaded pack sizes: %s", pack_sizes)

    return Config(port=port, pack_sizes=pack_sizes)