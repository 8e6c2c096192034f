from .log_sink import LogSink
from .result_store import ResultStore

# Public port exports keep wiring explicit at composition time.
__all__ = ["LogSink", "ResultStore"]
