from __future__ import annotations

import re

from .errors import FormatError, ReasonCode

DELIMITER = ","

# Tokens hold 32-bit signed values, matching the calculator's host integer width.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# ASCII whitespace, optional sign, ASCII digits. int() alone would also take
# underscores, non-ASCII digits and Unicode spaces.
_TOKEN_PATTERN = re.compile(r"^[ \t\n\r\v\f]*([+-]?[0-9]+)[ \t\n\r\v\f]*$")


def split_tokens(text: str) -> list[str]:
    # No stripping here; whitespace tolerance belongs to parse_token.
    return text.split(DELIMITER)


def parse_token(token: str, index: int = 0) -> int:
    match = _TOKEN_PATTERN.match(token)
    if match is None:
        raise FormatError(token, index, ReasonCode.NOT_AN_INTEGER)

    value = int(match.group(1))
    if not INT_MIN <= value <= INT_MAX:
        raise FormatError(token, index, ReasonCode.OUT_OF_RANGE)
    return value


def parse_tokens(text: str) -> list[int]:
    # Encounter order decides which malformed token is reported first.
    return [parse_token(token, idx) for idx, token in enumerate(split_tokens(text))]
