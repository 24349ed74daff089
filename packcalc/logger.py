"""Plain-text request logger."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO

__all__ = ["Logger"]

_PREFIX = "order-packs-calculator: "
_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


class Logger:
    """Writes timestamped INFO and ERROR lines to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        stamp = datetime.now().strftime(_TIME_FORMAT)
        self._stream.write(f"{_PREFIX}{stamp} {text}\n")
        self._stream.flush()

    def info(self, msg: str) -> None:
        """Log an informational message."""
        self._write(f"[INFO] {msg}")

    def error(self, msg: str, err: object) -> None:
        """Log a message together with the error that caused it."""
        self._write(f"[ERROR] {msg}: {err}")