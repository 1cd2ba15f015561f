"""Display formatting and lenient parsing of typed numbers."""
from __future__ import annotations

import math
import re
from decimal import Decimal

_STRIP_RE = re.compile(r"[^0-9.\-]+")
_LEADING_FLOAT_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def parse_number(value) -> float:
    """Normalize a typed field to a float.

    Currency punctuation and any other non-numeric characters are dropped,
    then the leading number is read the way a browser's ``parseFloat`` would.
    Anything that does not parse becomes ``0``.
    """

    if value is None:
        return 0.0
    cleaned = _STRIP_RE.sub("", str(value))
    m = _LEADING_FLOAT_RE.match(cleaned)
    if not m:
        return 0.0
    out = float(m.group(0))
    return out if math.isfinite(out) else 0.0


def _bad(value) -> bool:
    if value is None:
        return True
    try:
        return not math.isfinite(float(value))
    except (TypeError, ValueError):
        return True


def format_currency(value) -> str:
    """Two-decimal USD, e.g. ``$1,234.50`` or ``-$80.00``."""
    if _bad(value):
        return "$0.00"
    v = round(float(value), 2)
    if v < 0:
        return f"-${-v:,.2f}"
    return f"${v:,.2f}"


def format_percent(value) -> str:
    if _bad(value):
        return "0.00%"
    return f"{float(value):.2f}%"


def number_to_field(value: float) -> str:
    """Render a computed number back into a text field.

    Always fixed-point: ``parse_number`` drops an exponent marker, so
    ``"5e-06"`` would read back as ``5``.
    """
    if _bad(value):
        return "0"
    v = float(value)
    if v.is_integer():
        return str(int(v))
    return format(Decimal(repr(v)), "f")
