"""
Unit catalog for Whisker.

Static table of the volume and weight units we recognise in ingredient text,
with conversion factors to a shared base unit per type and the cross-system
equivalent used when switching between imperial and metric.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, List


class MeasurementType(str, Enum):
    VOLUME = "volume"
    WEIGHT = "weight"


class UnitSystem(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"

    @property
    def other(self) -> "UnitSystem":
        if self is UnitSystem.IMPERIAL:
            return UnitSystem.METRIC
        return UnitSystem.IMPERIAL


@dataclass(frozen=True)
class UnitDefinition:
    # Base units: ml (volume), g (weight)
    name: str
    plural: str
    abbreviations: Tuple[str, ...]
    measurement_type: MeasurementType
    system: UnitSystem
    conversion_factor: float  # base units per 1 of this unit
    metric_equivalent: str
    imperial_equivalent: str
    symbol: str

    @property
    def spellings(self) -> Tuple[str, ...]:
        """Every way the unit may be written, name first."""
        seen = []
        for word in (self.name, self.plural, *self.abbreviations):
            if word not in seen:
                seen.append(word)
        return tuple(seen)

    def equivalent_name(self, target_system: UnitSystem) -> str:
        if target_system is UnitSystem.METRIC:
            return self.metric_equivalent
        return self.imperial_equivalent

    def to_base(self, value: float) -> float:
        return value * self.conversion_factor

    def from_base(self, base_value: float) -> float:
        return base_value / self.conversion_factor

    def display_name(self, value: float) -> str:
        """
        Unit label to print next to a quantity.

        Metric units always use their symbol ("5 ml", "1 ml"). Imperial units
        use the full name, pluralized only above one ("½ cup", "1 cup", "2 cups").
        """
        if self.system is UnitSystem.METRIC:
            return self.symbol
        return self.plural if value > 1.0 else self.name


UNIT_DEFINITIONS: Tuple[UnitDefinition, ...] = (
    # Imperial volume
    UnitDefinition(
        name="cup", plural="cups",
        abbreviations=("cup", "cups", "c."),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.IMPERIAL,
        conversion_factor=236.588, metric_equivalent="ml", imperial_equivalent="cup",
        symbol="c.",
    ),
    UnitDefinition(
        name="tablespoon", plural="tablespoons",
        abbreviations=("tablespoon", "tablespoons", "tbsp", "tbsps", "tbs", "tbs."),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.IMPERIAL,
        conversion_factor=14.7868, metric_equivalent="ml", imperial_equivalent="tablespoon",
        symbol="tbsp",
    ),
    UnitDefinition(
        name="teaspoon", plural="teaspoons",
        abbreviations=("teaspoon", "teaspoons", "tsp", "tsps", "tsp."),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.IMPERIAL,
        conversion_factor=4.92892, metric_equivalent="ml", imperial_equivalent="teaspoon",
        symbol="tsp",
    ),
    UnitDefinition(
        name="fluid ounce", plural="fluid ounces",
        abbreviations=("fluid ounce", "fluid ounces", "fl oz", "fl.oz."),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.IMPERIAL,
        conversion_factor=29.5735, metric_equivalent="ml", imperial_equivalent="fluid ounce",
        symbol="fl oz",
    ),
    UnitDefinition(
        name="quart", plural="quarts",
        abbreviations=("quart", "quarts", "qt", "qt."),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.IMPERIAL,
        conversion_factor=946.353, metric_equivalent="ml", imperial_equivalent="quart",
        symbol="qt",
    ),
    UnitDefinition(
        name="pint", plural="pints",
        abbreviations=("pint", "pints", "pt", "pt."),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.IMPERIAL,
        conversion_factor=473.176, metric_equivalent="ml", imperial_equivalent="pint",
        symbol="pt",
    ),
    UnitDefinition(
        name="gallon", plural="gallons",
        abbreviations=("gallon", "gallons", "gal", "gal."),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.IMPERIAL,
        conversion_factor=3785.41, metric_equivalent="ml", imperial_equivalent="gallon",
        symbol="gal",
    ),
    # Imperial weight
    UnitDefinition(
        name="pound", plural="pounds",
        abbreviations=("pound", "pounds", "lb", "lbs", "lb."),
        measurement_type=MeasurementType.WEIGHT, system=UnitSystem.IMPERIAL,
        conversion_factor=453.592, metric_equivalent="g", imperial_equivalent="pound",
        symbol="lb",
    ),
    UnitDefinition(
        name="ounce", plural="ounces",
        abbreviations=("ounce", "ounces", "oz", "oz."),
        measurement_type=MeasurementType.WEIGHT, system=UnitSystem.IMPERIAL,
        conversion_factor=28.3495, metric_equivalent="g", imperial_equivalent="ounce",
        symbol="oz",
    ),
    # Metric volume
    UnitDefinition(
        name="milliliter", plural="milliliters",
        abbreviations=("milliliter", "milliliters", "ml", "mL"),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.METRIC,
        conversion_factor=1.0, metric_equivalent="ml", imperial_equivalent="teaspoon",
        symbol="ml",
    ),
    UnitDefinition(
        name="liter", plural="liters",
        abbreviations=("liter", "liters", "l", "L"),
        measurement_type=MeasurementType.VOLUME, system=UnitSystem.METRIC,
        conversion_factor=1000.0, metric_equivalent="ml", imperial_equivalent="quart",
        symbol="l",
    ),
    # Metric weight
    UnitDefinition(
        name="gram", plural="grams",
        abbreviations=("gram", "grams", "g", "g."),
        measurement_type=MeasurementType.WEIGHT, system=UnitSystem.METRIC,
        conversion_factor=1.0, metric_equivalent="g", imperial_equivalent="ounce",
        symbol="g",
    ),
    UnitDefinition(
        name="kilogram", plural="kilograms",
        abbreviations=("kilogram", "kilograms", "kg", "kg."),
        measurement_type=MeasurementType.WEIGHT, system=UnitSystem.METRIC,
        conversion_factor=1000.0, metric_equivalent="g", imperial_equivalent="pound",
        symbol="kg",
    ),
)


def _normalize_key(text: str) -> str:
    return re.sub(r"\s+", " ", text.strip()).lower()


# Lowercase spelling -> unit. First definition wins on a clash.
_LOOKUP = {}
for _unit in UNIT_DEFINITIONS:
    for _word in _unit.spellings:
        _LOOKUP.setdefault(_normalize_key(_word), _unit)


def find_unit(text: str) -> Optional[UnitDefinition]:
    """Find a unit by its name, plural or any abbreviation (case-insensitive)."""
    if not text:
        return None
    return _LOOKUP.get(_normalize_key(text))


def find_equivalent(unit: UnitDefinition, target_system: UnitSystem) -> Optional[UnitDefinition]:
    """Resolve the unit to switch to when expressing `unit` in `target_system`."""
    return find_unit(unit.equivalent_name(target_system))


def units_for(measurement_type: MeasurementType, system: UnitSystem) -> List[UnitDefinition]:
    return [
        u for u in UNIT_DEFINITIONS
        if u.measurement_type is measurement_type and u.system is system
    ]


def unit_words(
    system: Optional[UnitSystem] = None,
    measurement_type: Optional[MeasurementType] = None,
) -> List[str]:
    """
    All spellings of the matching units, longest first so that regex
    alternations prefer "cups" over "cup" and "liter" over "l".
    """
    words = []
    for unit in UNIT_DEFINITIONS:
        if system is not None and unit.system is not system:
            continue
        if measurement_type is not None and unit.measurement_type is not measurement_type:
            continue
        for word in unit.spellings:
            if word not in words:
                words.append(word)
    return sorted(words, key=len, reverse=True)
