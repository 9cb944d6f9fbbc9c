from __future__ import annotations


def format_number(value: float) -> str:
    """Six significant digits, no trailing zeros (30000, 62.5, 1.23457e+06)."""
    return f"{value:g}"


def format_money(value: float, currency: str) -> str:
    return f"{currency} {format_number(value)}"
