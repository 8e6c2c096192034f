from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from string_calculator.observability.logging import LogMessage, level_enabled
from string_calculator.ports.log_sink import LogSink


@dataclass
class StderrLogSink(LogSink):
    # Console sink; stays off stdout, which carries the CLI's sums.
    stream: TextIO | None = None

    def emit(self, message: LogMessage) -> None:
        # Resolve sys.stderr per call so redirected streams are honored.
        target = self.stream if self.stream is not None else sys.stderr
        target.write(_encode(message) + "\n")
        target.flush()


@dataclass
class JsonlLogSink(LogSink):
    # Appends one record per line; the file is opened on first emit.
    path: Path
    _handle: TextIO | None = field(default=None, init=False, repr=False)

    def emit(self, message: LogMessage) -> None:
        if self._handle is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.path.open("a", encoding="utf-8")
        self._handle.write(_encode(message) + "\n")
        self._handle.flush()

    def close(self) -> None:
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None


class LevelFilterLogSink(LogSink):
    # Drops messages below the configured threshold before delegating.
    def __init__(self, inner: LogSink, level: str) -> None:
        self._inner = inner
        self._level = level

    def emit(self, message: LogMessage) -> None:
        if level_enabled(message.level, self._level):
            self._inner.emit(message)

    def close(self) -> None:
        close = getattr(self._inner, "close", None)
        if callable(close):
            close()


def _encode(message: LogMessage) -> str:
    return json.dumps(message.to_record(), separators=(",", ":"), ensure_ascii=False)
