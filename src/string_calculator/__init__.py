from .domain import FormatError, is_prime, parse_token, parse_tokens, split_tokens
from .ports import ResultStore
from .usecases import StringCalculator

# Top-level exports cover the calculator core; adapters and config stay in their packages.
__all__ = [
    "FormatError",
    "ResultStore",
    "StringCalculator",
    "is_prime",
    "parse_token",
    "parse_tokens",
    "split_tokens",
]
