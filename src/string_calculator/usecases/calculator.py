from __future__ import annotations

from string_calculator.domain.primes import is_prime
from string_calculator.domain.tokens import parse_tokens
from string_calculator.observability.logging import EVENT_PRIME_PERSISTED, EVENT_SUM_COMPUTED, LogMessage
from string_calculator.ports.log_sink import LogSink
from string_calculator.ports.result_store import ResultStore


class StringCalculator:
    """Sums comma-separated integers and records prime sums in a store.

    The store is optional; without one the calculator only computes. Each
    ``add`` call is independent: the only state held is the injected store
    and log sink.
    """

    def __init__(self, store: ResultStore | None = None, *, log_sink: LogSink | None = None) -> None:
        self._store = store
        self._log_sink = log_sink

    def add(self, text: str | None) -> int:
        """Return the sum of the tokens in ``text``.

        Raises ``FormatError`` on the first malformed token; nothing is
        persisted in that case. When a store is configured and the sum is
        prime, the store is called exactly once with the sum.
        """
        if not text:
            return 0

        # Parsing completes before anything else so a bad token aborts with no side effects.
        total = sum(parse_tokens(text))
        self._log("debug", EVENT_SUM_COMPUTED, total)

        if self._store is not None and is_prime(total):
            self._store.persist(total)
            self._log("info", EVENT_PRIME_PERSISTED, total)

        return total

    def _log(self, level: str, event: str, total: int) -> None:
        if self._log_sink is not None:
            self._log_sink.emit(LogMessage(level=level, event=event, total=total))
