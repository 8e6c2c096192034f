from __future__ import annotations

from typing import Protocol, runtime_checkable


# ResultStore is the single capability the calculator needs to record prime sums.
@runtime_checkable
class ResultStore(Protocol):
    def persist(self, value: int) -> None:
        """Durably record one prime sum."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ResultStore is a port; use a concrete adapter.")
