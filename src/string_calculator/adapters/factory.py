from __future__ import annotations

from pathlib import Path

from string_calculator.adapters.log_sinks import JsonlLogSink, LevelFilterLogSink, StderrLogSink
from string_calculator.adapters.result_store import InMemoryResultStore, JsonlResultStore
from string_calculator.config.models import LoggingConfig, StoreConfig
from string_calculator.ports.log_sink import LogSink
from string_calculator.ports.result_store import ResultStore


def build_result_store(config: StoreConfig) -> ResultStore | None:
    # "none" yields the capability-less mode: sums are never persisted.
    if config.kind == "none":
        return None
    if config.kind == "memory":
        return InMemoryResultStore()
    assert config.path is not None
    return JsonlResultStore(Path(config.path))


def build_log_sink(config: LoggingConfig) -> LogSink | None:
    if config.kind == "none":
        return None
    if config.kind == "stderr":
        inner: LogSink = StderrLogSink()
    else:
        assert config.path is not None
        inner = JsonlLogSink(Path(config.path))
    return LevelFilterLogSink(inner, config.level)
