"""
Quantity literals.

Parses the numeric part of a measurement ("2", "2.5", "1/2", "1 1/2", "½",
"1½") into a float, and formats a float back into the most readable literal.
"""

import re
from decimal import Decimal, ROUND_HALF_UP

VULGAR_FRACTIONS = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅐": 1 / 7,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
    "⅑": 1 / 9,
    "⅒": 0.1,
}

# Glyphs we are willing to print; the rest are accepted on input only.
# Order is the lookup order when formatting.
FRIENDLY_FRACTIONS = ("½", "¼", "¾", "⅓", "⅔", "⅛", "⅜", "⅝", "⅞")

FRACTION_TOLERANCE = 0.01

VULGAR_CHARS = "".join(VULGAR_FRACTIONS.keys())

_NUMBER = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
_INTEGER = re.compile(r"^\d+$")
_FRACTION = re.compile(r"^(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)$")
_MIXED = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)$")


class QuantityParseError(ValueError):
    """Raised when a string is not a quantity literal we understand."""


def _parse_vulgar(s: str):
    """Handle "½", "1½" and "1 ½". Returns None if no glyph is present."""
    glyphs = [c for c in s if c in VULGAR_FRACTIONS]
    if not glyphs:
        return None
    if len(glyphs) > 1 or not s.endswith(glyphs[0]):
        raise QuantityParseError(f"Unrecognised quantity: {s!r}")

    fraction = VULGAR_FRACTIONS[glyphs[0]]
    whole = s[:-1].strip()
    if not whole:
        return fraction
    if _INTEGER.match(whole):
        return int(whole) + fraction
    raise QuantityParseError(f"Unrecognised quantity: {s!r}")


def _divide(numerator: str, denominator: str, original: str) -> float:
    denom = float(denominator)
    if denom == 0:
        raise QuantityParseError(f"Zero denominator in {original!r}")
    return float(numerator) / denom


def parse_quantity(text: str) -> float:
    """
    Parse a quantity literal into a float.

    Vulgar-fraction forms are tried first since "1½" is not a valid decimal.
    Raises QuantityParseError for anything else, including zero denominators.
    """
    if text is None:
        raise QuantityParseError("Empty quantity")
    s = text.strip()
    if not s:
        raise QuantityParseError("Empty quantity")

    vulgar = _parse_vulgar(s)
    if vulgar is not None:
        return vulgar

    if _NUMBER.match(s):
        return float(s)

    m = _FRACTION.match(s)
    if m:
        return _divide(m.group(1), m.group(2), s)

    m = _MIXED.match(s)
    if m:
        return int(m.group(1)) + _divide(m.group(2), m.group(3), s)

    raise QuantityParseError(f"Unrecognised quantity: {s!r}")


def _round2(value: float) -> Decimal:
    return Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _match_fraction(remainder: float):
    for glyph in FRIENDLY_FRACTIONS:
        if abs(remainder - VULGAR_FRACTIONS[glyph]) < FRACTION_TOLERANCE:
            return glyph
    return None


def format_quantity(value: float) -> str:
    """
    Format a float for display.

    Whole numbers print without a decimal point. Values under 10 that sit
    within 0.01 of a friendly fraction print as a glyph ("½", "1½"). Anything
    else is rounded to two decimals without trailing zeros ("2.8", "1.33").
    """
    if value == int(value):
        return str(int(value))

    if value < 10:
        whole = int(value)
        glyph = _match_fraction(value - whole)
        if glyph:
            return glyph if whole == 0 else f"{whole}{glyph}"

    rounded = _round2(value)
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")
