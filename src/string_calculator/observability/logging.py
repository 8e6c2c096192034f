from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LOGGER_NAME = "string_calculator"

# Ordered from most to least verbose.
LOG_LEVELS: tuple[str, ...] = ("debug", "info", "error")

EVENT_SUM_COMPUTED = "sum_computed"
EVENT_PRIME_PERSISTED = "prime_persisted"
EVENT_FORMAT_ERROR = "format_error"


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One calculator event; ``total`` is set for events that carry a computed sum.
    level: str
    event: str
    total: int | None = None
    detail: dict[str, object] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.level!r}")
        if not self.event:
            raise ValueError("LogMessage requires a non-empty event")

    def to_record(self) -> dict[str, object]:
        # Flat record: fixed keys first, then event-specific detail.
        record: dict[str, object] = {
            "ts": self.timestamp.isoformat().replace("+00:00", "Z"),
            "level": self.level,
            "logger": LOGGER_NAME,
            "event": self.event,
        }
        if self.total is not None:
            record["total"] = self.total
        record.update(self.detail)
        return record


def level_enabled(level: str, threshold: str) -> bool:
    return LOG_LEVELS.index(level) >= LOG_LEVELS.index(threshold)
