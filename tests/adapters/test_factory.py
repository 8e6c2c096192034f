from __future__ import annotations

from pathlib import Path

from string_calculator.adapters.factory import build_log_sink, build_result_store
from string_calculator.adapters.log_sinks import LevelFilterLogSink
from string_calculator.adapters.result_store import InMemoryResultStore, JsonlResultStore
from string_calculator.config.models import LoggingConfig, StoreConfig


def test_build_result_store_by_kind(tmp_path: Path) -> None:
    assert build_result_store(StoreConfig(kind="none")) is None
    assert isinstance(build_result_store(StoreConfig(kind="memory")), InMemoryResultStore)

    store = build_result_store(StoreConfig(kind="jsonl", path=str(tmp_path / "p.jsonl")))
    assert isinstance(store, JsonlResultStore)
    assert store.path == tmp_path / "p.jsonl"


def test_build_log_sink_by_kind(tmp_path: Path) -> None:
    assert build_log_sink(LoggingConfig(kind="none")) is None
    assert isinstance(build_log_sink(LoggingConfig(kind="stderr")), LevelFilterLogSink)

    sink = build_log_sink(LoggingConfig(kind="jsonl", path=str(tmp_path / "log.jsonl")))
    assert isinstance(sink, LevelFilterLogSink)
    sink.close()
