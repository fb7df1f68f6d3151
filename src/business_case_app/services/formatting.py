from __future__ import annotations

from typing import Optional


def fmt_currency(value: float, currency: str, decimals: int = 0) -> str:
    return f"{currency} {value:,.{decimals}f}"


def fmt_pct(value: float) -> str:
    return f"{value:.1f}%"


def fmt_payback(payback_year: Optional[int]) -> str:
    return f"Year {payback_year}" if payback_year is not None else "Not reached"


def fmt_break_even(break_even_units: Optional[float]) -> str:
    return f"{break_even_units:,.0f} units" if break_even_units is not None else "N/A"
