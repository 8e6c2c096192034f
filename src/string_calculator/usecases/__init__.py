from .calculator import StringCalculator

__all__ = ["StringCalculator"]
