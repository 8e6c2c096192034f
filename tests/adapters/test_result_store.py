from __future__ import annotations

import json
from pathlib import Path

from string_calculator.adapters.result_store import InMemoryResultStore, JsonlResultStore


def _read_results(path: Path) -> list[int]:
    if not path.exists():
        return []
    return [json.loads(line)["result"] for line in path.read_text(encoding="utf-8").splitlines()]


def test_in_memory_store_keeps_call_order() -> None:
    store = InMemoryResultStore()
    store.persist(11)
    store.persist(2)
    assert store.values == [11, 2]


def test_jsonl_store_is_lazy(tmp_path: Path) -> None:
    # Construction must not touch the filesystem.
    path = tmp_path / "nested" / "primes.jsonl"
    store = JsonlResultStore(path)
    assert not path.exists()
    assert _read_results(store.path) == []


def test_jsonl_store_writes_one_object_per_line(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "primes.jsonl"
    store = JsonlResultStore(path)
    store.persist(2)
    store.persist(11)
    store.close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line) for line in lines] == [{"result": 2}, {"result": 11}]
    assert _read_results(store.path) == [2, 11]


def test_jsonl_store_appends_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "primes.jsonl"
    first = JsonlResultStore(path)
    first.persist(3)
    first.close()
    second = JsonlResultStore(path)
    second.persist(5)
    second.close()
    assert _read_results(path) == [3, 5]


def test_jsonl_store_close_is_idempotent(tmp_path: Path) -> None:
    store = JsonlResultStore(tmp_path / "primes.jsonl")
    store.close()
    store.persist(7)
    store.close()
    store.close()
    assert _read_results(store.path) == [7]
