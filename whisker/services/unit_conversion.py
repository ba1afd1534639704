"""
Unit Conversion Service for Whisker.

Rewrites ingredient text from one measurement system to the other, picking the
most readable unit for the converted magnitude.
"""

import logging
from typing import List, Optional, Tuple

from ..measurement.catalog import (
    MeasurementType,
    UnitDefinition,
    UnitSystem,
    find_equivalent,
    find_unit,
    units_for,
)
from ..measurement.quantity import format_quantity, parse_quantity
from ..measurement.scanner import extract_measurements

logger = logging.getLogger("whisker.units")


class ConvertedQuantity:
    def __init__(self, qty: float, unit: UnitDefinition):
        self.qty = qty
        self.unit = unit

    @property
    def display(self) -> str:
        shown = format_quantity(self.qty)
        # Pluralize on what the reader sees, not the raw float.
        return f"{shown} {self.unit.display_name(parse_quantity(shown))}"

    def to_dict(self):
        return {
            "qty": self.qty,
            "unit": self.unit.name,
            "display": self.display,
        }


# Lower bound in base units (ml / g) -> unit name, largest first.
BEST_UNIT_THRESHOLDS = {
    (MeasurementType.VOLUME, UnitSystem.IMPERIAL): [
        (3785, "gallon"),
        (946, "quart"),
        (473, "pint"),
        (59, "cup"),  # 1/4 cup and up reads better in cups
        (14.8, "tablespoon"),
        (0, "teaspoon"),
    ],
    (MeasurementType.VOLUME, UnitSystem.METRIC): [
        (1000, "liter"),
        (0, "milliliter"),
    ],
    (MeasurementType.WEIGHT, UnitSystem.IMPERIAL): [
        (453.6, "pound"),
        (0, "ounce"),
    ],
    (MeasurementType.WEIGHT, UnitSystem.METRIC): [
        (1000, "kilogram"),
        (0, "gram"),
    ],
}


def best_unit(
    base_value: float,
    measurement_type: MeasurementType,
    target_system: UnitSystem,
) -> Tuple[float, UnitDefinition]:
    """
    Pick the most readable unit for a value already expressed in base units.
    Returns (value_in_that_unit, unit).
    """
    eligible = {u.name: u for u in units_for(measurement_type, target_system)}
    thresholds = BEST_UNIT_THRESHOLDS[(measurement_type, target_system)]

    chosen = eligible[thresholds[-1][1]]
    for lower_bound, name in thresholds:
        if base_value >= lower_bound:
            chosen = eligible[name]
            break
    return chosen.from_base(base_value), chosen


class UnitConverter:
    """
    Stateless converter between imperial and metric ingredient text.
    Construct once and share.
    """

    def convert(self, text: str, target_system: UnitSystem) -> str:
        """
        Rewrite every cross-system measurement in `text` into `target_system`.

        Bare numbers, unknown units and units already in the target system are
        left untouched, as is all surrounding text.
        """
        measurements = extract_measurements(text)
        if not measurements:
            return text

        result = text
        # Work backwards so earlier spans stay valid after each splice.
        for match in reversed(measurements):
            if not match.unit_text:
                continue

            source = find_unit(match.unit_text)
            if source is None:
                logger.debug(f"Unknown unit {match.unit_text!r}, leaving as is")
                continue

            seed = find_equivalent(source, target_system)
            if seed is None:
                logger.debug(f"No {target_system.value} equivalent for {source.name}")
                continue

            if source.system is target_system:
                continue

            converted = self._to_best_unit(match.value, source, target_system)
            start, end = match.span
            result = result[:start] + converted.display + result[end:]

        return result

    def convert_many(self, texts: List[str], target_system: UnitSystem) -> List[str]:
        return [self.convert(t, target_system) for t in texts]

    def convert_quantity(
        self,
        qty: float,
        unit_text: str,
        target_system: UnitSystem,
    ) -> Optional[ConvertedQuantity]:
        """
        Convert a single quantity. Unlike `convert`, a unit already in the
        target system is still re-expressed in its best-fit unit
        (1500 ml -> 1.5 l).
        """
        source = find_unit(unit_text)
        if source is None:
            return None
        return self._to_best_unit(qty, source, target_system)

    def _to_best_unit(
        self,
        qty: float,
        source: UnitDefinition,
        target_system: UnitSystem,
    ) -> ConvertedQuantity:
        base_value = source.to_base(qty)
        value, unit = best_unit(base_value, source.measurement_type, target_system)
        return ConvertedQuantity(value, unit)
