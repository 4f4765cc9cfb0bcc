"""
Display formatting for engine figures.

The engine hands raw numbers to these helpers; nothing here changes a
classification.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext

# Keyed by status value ("green" / "amber" / "red")
STATUS_LABELS = {
    "green": "Good",
    "amber": "Attention",
    "red": "Urgent",
}


def _round_half_up(value: float, places: int) -> Decimal:
    # Rounds the exact binary value, so 30.15 (stored as 30.1499...) gives 30.1
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + places + 2)
        return exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_percent(value: float) -> str:
    """Whole-number percentage, e.g. 112.5 -> '113%'."""
    return f"{_round_half_up(value, 0)}%"


def format_ratio(value: float) -> str:
    """Student:teacher style ratio to one decimal, e.g. 37.04 -> '37.0:1'."""
    return f"{_round_half_up(value, 1)}:1"


def status_label(status) -> str:
    """Human label for a Status (or its string value)."""
    return STATUS_LABELS[getattr(status, "value", status)]
