# Services Module
from .money import format_amount, format_money, multiply, round_money, to_decimal, to_float

__all__ = ["format_amount", "format_money", "multiply", "round_money", "to_decimal", "to_float"]
