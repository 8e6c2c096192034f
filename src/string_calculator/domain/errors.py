from __future__ import annotations

from enum import Enum


class ReasonCode(str, Enum):
    # Stable reason codes for rejected tokens.
    NOT_AN_INTEGER = "NOT_AN_INTEGER"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class FormatError(ValueError):
    """Raised when a token cannot be parsed as a signed base-10 integer."""

    message = "Input format was incorrect"

    def __init__(self, token: str, index: int, reason: ReasonCode = ReasonCode.NOT_AN_INTEGER) -> None:
        super().__init__(self.message)
        self.token = token
        self.index = index
        self.reason = reason
