from __future__ import annotations

import pytest

from string_calculator.adapters.result_store import InMemoryResultStore, JsonlResultStore
from string_calculator.ports.result_store import ResultStore


def test_result_store_port_conformance(tmp_path) -> None:
    # Adapters should conform to the ResultStore port at runtime for wiring safety.
    assert isinstance(InMemoryResultStore(), ResultStore)
    assert isinstance(JsonlResultStore(tmp_path / "primes.jsonl"), ResultStore)


def test_plain_object_with_persist_conforms() -> None:
    # Structural typing: any object with persist() is a valid store.
    class _Spy:
        def persist(self, value: int) -> None:
            pass

    assert isinstance(_Spy(), ResultStore)


def test_result_store_port_default_raises() -> None:
    # Direct port calls are a wiring error; the default implementation raises.
    class _PortOnly(ResultStore):
        pass

    with pytest.raises(NotImplementedError):
        _PortOnly().persist(2)
