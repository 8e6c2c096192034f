from .factory import build_log_sink, build_result_store
from .log_sinks import JsonlLogSink, LevelFilterLogSink, StderrLogSink
from .result_store import InMemoryResultStore, JsonlResultStore

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "InMemoryResultStore",
    "JsonlLogSink",
    "JsonlResultStore",
    "LevelFilterLogSink",
    "StderrLogSink",
    "build_log_sink",
    "build_result_store",
]
