"""Number formatting for converted values.

Two digit-grouping conventions are supported: ``international`` groups by
thousands (``1,234,567``) and ``indian`` groups the last three digits and then
pairs (``12,34,567``).
"""
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import List

INTERNATIONAL = "international"
INDIAN = "indian"
NUMBER_SYSTEMS = (INTERNATIONAL, INDIAN)

# Magnitudes outside [SCIENTIFIC_LOWER, SCIENTIFIC_UPPER) use exponent notation
SCIENTIFIC_LOWER = 1e-6
SCIENTIFIC_UPPER = 1e9
SCIENTIFIC_DIGITS = 3
MAX_FRACTION_DIGITS = 6

NAN_TEXT = "NaN"
INFINITY_TEXT = "∞"

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")
_NUMERIC_PREFIX_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")

_INTERNATIONAL_LABELS = ((1e9, "B"), (1e6, "M"), (1e3, "K"))
_INDIAN_LABELS = ((1e7, "Cr"), (1e5, "L"), (1e3, "K"))


def group_digits(digits: str, number_system: str = INTERNATIONAL) -> str:
    """Insert separators into a string of integer digits."""
    if number_system == INDIAN and len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs: List[str] = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        return ",".join(pairs + [tail])

    groups: List[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ",".join(groups)


def _format_fixed(value: float, max_fraction_digits: int, number_system: str) -> str:
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP).normalize()
    if rounded.is_zero():
        # Avoid "-0" for values that round away
        return "0"
    text = format(rounded, "f")
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    integer, _, fraction = text.partition(".")
    grouped = group_digits(integer, number_system)
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def _format_scientific(value: float) -> str:
    text = f"{value:.{SCIENTIFIC_DIGITS}e}"
    # Python pads exponents to two digits ("e-07"); display them unpadded
    return _EXPONENT_RE.sub(r"e\1\2", text)


def format_value(value: float, number_system: str = INTERNATIONAL) -> str:
    """Render a converted value for display.

    Zero is ``"0"``; very small or very large magnitudes use scientific
    notation with three fractional digits (``1.496e+11``); everything else is
    grouped with up to six fractional digits and trailing zeros dropped.

    Grouping is fixed to the two supported number systems (``,`` between
    groups, ``.`` before the fraction) and does not follow the process locale.
    """
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return INFINITY_TEXT if value > 0 else f"-{INFINITY_TEXT}"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude < SCIENTIFIC_LOWER or magnitude >= SCIENTIFIC_UPPER:
        return _format_scientific(value)

    return _format_fixed(value, MAX_FRACTION_DIGITS, number_system)


def format_for_input(value: float, number_system: str = INTERNATIONAL) -> str:
    """Text shown inside an editable field; zero shows as an empty field."""
    if value == 0:
        return ""
    return format_value(value, number_system)


def format_number(value: float, number_system: str = INTERNATIONAL, decimal_places: int = 2) -> str:
    if not math.isfinite(value):
        return "0"
    return _format_fixed(value, decimal_places, number_system)


def number_system_label(value: float, number_system: str = INTERNATIONAL) -> str:
    """Compact magnitude label, e.g. ``1.5 M`` or ``2.5 Cr``."""
    labels = _INDIAN_LABELS if number_system == INDIAN else _INTERNATIONAL_LABELS
    for threshold, suffix in labels:
        if value >= threshold:
            return f"{value / threshold:.1f} {suffix}"
    return format_number(value, number_system)


def parse_number_string(text: str) -> float:
    """Parse user input, ignoring grouping separators and stray characters.

    Everything except digits, ``.`` and ``-`` is dropped and the longest
    leading numeric prefix is used.  Unparsable input yields ``0.0``.
    """
    if not text or not text.strip():
        return 0.0
    cleaned = re.sub(r"[^\d.\-]", "", text)
    match = _NUMERIC_PREFIX_RE.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


__all__ = [
    "INTERNATIONAL",
    "INDIAN",
    "NUMBER_SYSTEMS",
    "format_value",
    "format_for_input",
    "format_number",
    "group_digits",
    "number_system_label",
    "parse_number_string",
]
