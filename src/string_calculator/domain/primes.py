from __future__ import annotations

import math


def is_prime(value: int) -> bool:
    # Values below 2 (zero, one, negatives) are never prime.
    if value < 2:
        return False
    if value == 2:
        return True
    if value % 2 == 0:
        return False
    limit = math.isqrt(value)
    for d in range(3, limit + 1, 2):
        if value % d == 0:
            return False
    return True
