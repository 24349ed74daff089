"""Command-line entry point that starts the pack calculator server."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from flask import Flask

from packcalc.config import Config, ConfigError, load_config
from packcalc.logger import Logger
from packcalc.repository import InMemoryPackRepository
from packcalc.service import CalculatePacksService
from packcalc.web import create_app

__all__ = ["split_address", "build_app", "main"]

_ANY_HOST = "0.0.0.0"


def split_address(address: str) -> tuple[str, int]:
    """Split a listen address such as ``:3000`` or ``localhost:3000`` into host and port."""
    host, sep, port_text = address.rpartition(":")
    if not sep or not port_text.isdigit():
        raise ValueError(f"invalid listen address {address!r}")
    port = int(port_text)
    if port > 65535:
        raise ValueError(f"port out of range in {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host or _ANY_HOST, port


def build_app(config: Config, static_folder: str | os.PathLike[str] | None = None) -> Flask:
    """Wire the repository, service and web layer from a configuration."""
    repo = InMemoryPackRepository(config.pack_sizes)
    service = CalculatePacksService(repo)
    return create_app(service, Logger(), static_folder)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration and serve the application until stopped."""
    parser = argparse.ArgumentParser(prog="packcalc", description="Order packs calculator server.")
    parser.add_argument("--static", default="./web", help="directory of static UI files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        config = load_config()
    except ConfigError as exc:
        raise SystemExit(f"Failed to load configuration: {exc}") from exc

    app = build_app(config, args.static)
    try:
        host, port = split_address(config.port)
        app.run(host=host, port=port)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Failed to start server: {exc}") from exc
    return 0