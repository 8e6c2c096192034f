from .errors import FormatError, ReasonCode
from .primes import is_prime
from .tokens import DELIMITER, INT_MAX, INT_MIN, parse_token, parse_tokens, split_tokens

# Public domain exports keep imports explicit across layers.
__all__ = [
    "DELIMITER",
    "FormatError",
    "INT_MAX",
    "INT_MIN",
    "ReasonCode",
    "is_prime",
    "parse_token",
    "parse_tokens",
    "split_tokens",
]
