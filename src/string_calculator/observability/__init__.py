from .logging import (
    EVENT_FORMAT_ERROR,
    EVENT_PRIME_PERSISTED,
    EVENT_SUM_COMPUTED,
    LOG_LEVELS,
    LOGGER_NAME,
    LogMessage,
    level_enabled,
)

__all__ = [
    "EVENT_FORMAT_ERROR",
    "EVENT_PRIME_PERSISTED",
    "EVENT_SUM_COMPUTED",
    "LOG_LEVELS",
    "LOGGER_NAME",
    "LogMessage",
    "level_enabled",
]
