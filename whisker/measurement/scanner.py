"""
Measurement scanner.

Finds every quantity (with or without a unit) in a free-text ingredient line.
Five pattern classes are applied to the whole string in a fixed priority; when
two classes claim overlapping text the higher-priority class wins.
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .catalog import (
    MeasurementType,
    UnitDefinition,
    UnitSystem,
    find_unit,
    unit_words,
)
from .quantity import VULGAR_CHARS, QuantityParseError, parse_quantity

logger = logging.getLogger("whisker.scanner")


class PatternClass(str, Enum):
    IMPERIAL_VOLUME = "imperial_volume"
    IMPERIAL_WEIGHT = "imperial_weight"
    METRIC_VOLUME = "metric_volume"
    METRIC_WEIGHT = "metric_weight"
    BARE_NUMBER = "bare_number"


PATTERN_PRIORITY: Tuple[PatternClass, ...] = (
    PatternClass.IMPERIAL_VOLUME,
    PatternClass.IMPERIAL_WEIGHT,
    PatternClass.METRIC_VOLUME,
    PatternClass.METRIC_WEIGHT,
    PatternClass.BARE_NUMBER,
)

_UNIT_CLASSES = {
    PatternClass.IMPERIAL_VOLUME: (UnitSystem.IMPERIAL, MeasurementType.VOLUME),
    PatternClass.IMPERIAL_WEIGHT: (UnitSystem.IMPERIAL, MeasurementType.WEIGHT),
    PatternClass.METRIC_VOLUME: (UnitSystem.METRIC, MeasurementType.VOLUME),
    PatternClass.METRIC_WEIGHT: (UnitSystem.METRIC, MeasurementType.WEIGHT),
}

# A quantity never starts in the middle of another number.
QUANTITY_PATTERN = (
    r"(?<![\d.,/])"
    rf"(?:(?:\d+\s*)?[{VULGAR_CHARS}]"
    r"|\d+(?:\s+\d+/\d+|/\d+|\.\d+)?)"
)

# Unit words must not run straight into another letter ("2 large" is not litres).
_WORD_END = r"(?![a-zA-Z])"


def _alternation(words: List[str]) -> str:
    # "fl oz" should also match "fl  oz"
    return "|".join(re.escape(w).replace(r"\ ", r"\s+") for w in words)


def _unit_pattern(system: UnitSystem, measurement_type: MeasurementType) -> "re.Pattern":
    units = _alternation(unit_words(system, measurement_type))
    return re.compile(
        rf"(?P<qty>{QUANTITY_PATTERN})\s*(?P<unit>{units}){_WORD_END}",
        re.IGNORECASE,
    )


def _bare_pattern() -> "re.Pattern":
    # Leading count only ("2 large eggs"); later numbers are sizes or temperatures.
    units = _alternation(unit_words())
    return re.compile(
        rf"\A\s*(?P<qty>{QUANTITY_PATTERN})"
        rf"(?=\s+(?![\s\d{VULGAR_CHARS}])(?!(?:{units}){_WORD_END}))",
        re.IGNORECASE,
    )


PATTERNS = {pattern_class: _unit_pattern(*key) for pattern_class, key in _UNIT_CLASSES.items()}
PATTERNS[PatternClass.BARE_NUMBER] = _bare_pattern()


@dataclass(frozen=True)
class MeasurementMatch:
    value: float
    unit_text: str
    start: int
    end: int
    quantity_start: int
    quantity_end: int
    pattern_class: PatternClass

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end

    @property
    def quantity_span(self) -> Tuple[int, int]:
        return self.quantity_start, self.quantity_end

    @property
    def unit(self) -> Optional[UnitDefinition]:
        return find_unit(self.unit_text) if self.unit_text else None

    def overlaps(self, other: "MeasurementMatch") -> bool:
        return self.start < other.end and other.start < self.end


def iter_candidates(text: str) -> Iterator[MeasurementMatch]:
    """
    Yield every parsable match of every pattern class, class by class in
    priority order. Overlaps between classes are not resolved here. A match
    always starts at its quantity, never at leading whitespace.
    """
    if not text:
        return
    for pattern_class in PATTERN_PRIORITY:
        for m in PATTERNS[pattern_class].finditer(text):
            qty_text = m.group("qty")
            try:
                value = parse_quantity(qty_text)
            except QuantityParseError as e:
                logger.debug(f"Dropping candidate {qty_text!r}: {e}")
                continue
            unit_text = m.groupdict().get("unit") or ""
            yield MeasurementMatch(
                value=value,
                unit_text=unit_text,
                start=m.start("qty"),
                end=m.end(),
                quantity_start=m.start("qty"),
                quantity_end=m.end("qty"),
                pattern_class=pattern_class,
            )


def extract_measurements(text: str) -> Optional[List[MeasurementMatch]]:
    """
    Ordered, non-overlapping measurements found in `text`.

    Returns None when the text holds no measurement at all. Candidates whose
    number cannot be parsed are skipped without failing the scan.
    """
    accepted: List[MeasurementMatch] = []
    for candidate in iter_candidates(text):
        if any(candidate.overlaps(m) for m in accepted):
            continue
        accepted.append(candidate)

    if not accepted:
        return None
    return sorted(accepted, key=lambda m: m.start)
