from .unit_conversion import UnitConverter, ConvertedQuantity, best_unit
from .scaling import ScalingEngine, ScalingState, ScalingSnapshot, render_ingredients
from .sessions import ScalingSessionStore

__all__ = [
    "UnitConverter", "ConvertedQuantity", "best_unit",
    "ScalingEngine", "ScalingState", "ScalingSnapshot", "render_ingredients",
    "ScalingSessionStore",
]
