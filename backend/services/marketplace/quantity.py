# backend/services/marketplace/quantity.py
"""
Helpers for the free-text quantity fields stored on crops and offers
("500 kg", "12.5 quintal", 200).

Storage keeps the display string; these helpers turn it into a
structured ``Quantity`` for arithmetic and back into text for writing.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass

DEFAULT_UNIT = "kg"

_NUMBER_RE = re.compile(r"(\d+(\.\d+)?)")
_UNIT_RE = re.compile(r"[a-zA-Z]+")
# leading float literal, same prefix rule as JavaScript parseFloat
_LEADING_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


@dataclass
class Quantity:
    amount: float = 0.0
    unit: str = DEFAULT_UNIT

    def __str__(self) -> str:
        return format_quantity(self.amount, self.unit)


def parse_quantity(raw) -> Quantity:
    """
    First number in the text is the amount (0 when none),
    first alphabetic run is the unit ("kg" when none).
    """
    text = str(raw)
    num = _NUMBER_RE.search(text)
    unit = _UNIT_RE.search(text)
    return Quantity(
        amount=float(num.group(0)) if num else 0.0,
        unit=unit.group(0) if unit else DEFAULT_UNIT,
    )


def parse_requested(raw) -> float:
    """
    Lenient number parse for offer.quantityRequested.
    "50 kg" -> 50.0, "abc"/None/"" -> 0.0
    """
    if isinstance(raw, bool) or raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        m = _LEADING_FLOAT_RE.match(str(raw).strip())
        if not m:
            return 0.0
        value = float(m.group(0))
    if math.isnan(value):
        return 0.0
    return value


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_quantity(amount: float, unit: str = DEFAULT_UNIT) -> str:
    return f"{format_number(amount)} {unit or DEFAULT_UNIT}"


def deduct(current: Quantity, requested: float):
    """
    Returns (remaining, sold_out). Remaining never goes below zero.
    """
    remaining = current.amount - requested
    if remaining <= 0:
        return Quantity(0.0, current.unit), True
    return Quantity(remaining, current.unit), False
