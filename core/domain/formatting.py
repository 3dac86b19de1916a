# core/domain/formatting.py
from __future__ import annotations

from datetime import date


def _pt_br_number(value: float, decimals: int) -> str:
    """
    Swap separators to the pt-BR convention.
    Example: 1234567.8 -> '1.234.567,80'
    """
    text = f"{{:,.{decimals}f}}".format(float(value))
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def fmt_brl(value: float | None) -> str:
    """
    Format a Real amount.
    Example: -37.4 -> '-R$ 37,40'
    """
    if value is None:
        return "-"
    sign = "-" if value < 0 else ""
    return f"{sign}R$ {_pt_br_number(abs(value), 2)}"


def fmt_quantity(value: float | None) -> str:
    """Quantities keep their own precision, decimal comma only."""
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return str(value).replace(".", ",")


def fmt_date_br(value: date | None) -> str:
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y")


__all__ = ["fmt_brl", "fmt_quantity", "fmt_date_br"]
