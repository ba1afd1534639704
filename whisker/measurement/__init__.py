from .catalog import (
    MeasurementType,
    UnitSystem,
    UnitDefinition,
    UNIT_DEFINITIONS,
    find_unit,
    find_equivalent,
    units_for,
)
from .quantity import QuantityParseError, parse_quantity, format_quantity
from .scanner import (
    MeasurementMatch,
    PatternClass,
    PATTERN_PRIORITY,
    extract_measurements,
    iter_candidates,
)

__all__ = [
    "MeasurementType", "UnitSystem", "UnitDefinition", "UNIT_DEFINITIONS",
    "find_unit", "find_equivalent", "units_for",
    "QuantityParseError", "parse_quantity", "format_quantity",
    "MeasurementMatch", "PatternClass", "PATTERN_PRIORITY",
    "extract_measurements", "iter_candidates",
]
