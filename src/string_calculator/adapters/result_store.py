from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from string_calculator.ports.result_store import ResultStore


@dataclass
class InMemoryResultStore(ResultStore):
    # Reference adapter; values are kept in persist-call order.
    values: list[int] = field(default_factory=list)

    def persist(self, value: int) -> None:
        self.values.append(value)


@dataclass
class JsonlResultStore(ResultStore):
    # Appends one {"result": n} object per line.
    path: Path
    encoding: str = "utf-8"
    _handle: TextIO | None = field(default=None, init=False, repr=False)

    def persist(self, value: int) -> None:
        # Open lazily so construction does not touch filesystem.
        if self._handle is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.path.open("a", encoding=self.encoding)
        self._handle.write(json.dumps({"result": value}, separators=(",", ":")) + "\n")
        self._handle.flush()

    def close(self) -> None:
        # Close is idempotent; safe to call multiple times.
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None

