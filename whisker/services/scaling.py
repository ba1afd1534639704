"""
Recipe scaling for Whisker.

ScalingEngine multiplies every quantity in an ingredient line by a factor.
ScalingState wraps it for one recipe-editing session: it keeps the original
ingredient list as a baseline and always derives the scaled list from it.
"""

import logging
import threading
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

from pydantic import BaseModel

from ..measurement.catalog import UnitSystem
from ..measurement.quantity import format_quantity
from ..measurement.scanner import extract_measurements
from .unit_conversion import UnitConverter

if TYPE_CHECKING:
    from ..models import Recipe

logger = logging.getLogger("whisker.scaling")


class ScalingEngine:
    """Stateless; construct once and share."""

    def scale_one(self, text: str, factor: float) -> str:
        """
        Multiply every quantity in `text` by `factor`.

        Only the numeric literal of each match is rewritten; unit words and
        punctuation are kept verbatim. Quantities that do not change keep their
        original spelling, so a factor of 1 returns the text untouched.
        """
        measurements = extract_measurements(text)
        if not measurements:
            return text

        result = text
        for match in reversed(measurements):
            scaled = match.value * factor
            if scaled == match.value:
                continue
            start, end = match.quantity_span
            result = result[:start] + format_quantity(scaled) + result[end:]
        return result

    def scale_many(self, texts: Sequence[str], factor: float) -> List[str]:
        return [self.scale_one(t, factor) for t in texts]

    def factor_from_target(self, text: str, target_value: float) -> Optional[float]:
        """
        Factor that turns the first quantity in `text` into `target_value`.
        Returns None when the line has no quantity or it is zero.
        """
        measurements = extract_measurements(text)
        if not measurements:
            return None
        original = measurements[0].value
        if original <= 0:
            return None
        return target_value / original


def render_ingredients(
    texts: Sequence[str],
    factor: float = 1.0,
    target_system: Optional[UnitSystem] = None,
    converter: Optional[UnitConverter] = None,
    engine: Optional[ScalingEngine] = None,
) -> List[str]:
    """
    Ingredient lines as they should be shown: converted from the originals
    into `target_system` (if given), then scaled by `factor`. Always start from
    the originals so repeated toggles do not accumulate rounding.
    """
    converter = converter or UnitConverter()
    engine = engine or ScalingEngine()

    lines = list(texts)
    if target_system is not None:
        lines = converter.convert_many(lines, target_system)
    if factor != 1.0:
        lines = engine.scale_many(lines, factor)
    return lines


class ScalingSnapshot(BaseModel):
    original_quantities: List[str]
    scaled_quantities: List[str]
    current_factor: float
    is_custom_scaling: bool
    custom_target_index: Optional[int] = None
    custom_target_value: Optional[float] = None


Listener = Callable[[ScalingSnapshot], None]


class ScalingState:
    """
    Scaling state for one editing session.

    `scaled_quantities` is never edited directly; every mutation recomputes it
    from `original_quantities` and `current_factor`, then notifies listeners.
    """

    def __init__(self, ingredients: Sequence[str] = (), engine: Optional[ScalingEngine] = None):
        self._engine = engine or ScalingEngine()
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

        self.original_quantities = tuple(ingredients)
        self.current_factor = 1.0
        self.scaled_quantities = list(self.original_quantities)
        self.is_custom_scaling = False
        self.custom_target_index: Optional[int] = None
        self.custom_target_value: Optional[float] = None

    # --- Observers ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.error(f"Scaling listener failed: {e}", exc_info=True)

    def snapshot(self) -> ScalingSnapshot:
        with self._lock:
            return ScalingSnapshot(
                original_quantities=list(self.original_quantities),
                scaled_quantities=list(self.scaled_quantities),
                current_factor=self.current_factor,
                is_custom_scaling=self.is_custom_scaling,
                custom_target_index=self.custom_target_index,
                custom_target_value=self.custom_target_value,
            )

    # --- Mutations ---

    def _clear_custom(self):
        self.is_custom_scaling = False
        self.custom_target_index = None
        self.custom_target_value = None

    def set_original(self, ingredients: Sequence[str]) -> None:
        """Replace the baseline and drop any scaling."""
        with self._lock:
            self.original_quantities = tuple(ingredients)
            self._reset_locked()
            self._notify()

    def reset(self) -> None:
        with self._lock:
            self._reset_locked()
            self._notify()

    def _reset_locked(self):
        self.current_factor = 1.0
        self._clear_custom()
        self.scaled_quantities = list(self.original_quantities)

    def apply_factor(self, factor: float) -> None:
        if factor <= 0:
            raise ValueError(f"Scaling factor must be positive, got {factor}")
        with self._lock:
            self.current_factor = factor
            self._clear_custom()
            self.scaled_quantities = self._engine.scale_many(self.original_quantities, factor)
            self._notify()

    def apply_custom_scaling(self, index: int, target_value: float) -> bool:
        """
        Scale so that ingredient `index` ends up at `target_value`.

        Out-of-range indexes and lines with no usable quantity leave the state
        untouched and return False.
        """
        with self._lock:
            if not 0 <= index < len(self.original_quantities):
                logger.debug(f"Custom scaling index {index} out of range")
                return False

            factor = self._engine.factor_from_target(self.original_quantities[index], target_value)
            if factor is None or factor <= 0:
                logger.debug(f"No scaling factor derivable from ingredient {index}")
                return False

            self.current_factor = factor
            self.is_custom_scaling = True
            self.custom_target_index = index
            self.custom_target_value = target_value
            self.scaled_quantities = self._engine.scale_many(self.original_quantities, factor)
            self._notify()
            return True

    def scaled_recipe(self, recipe: "Recipe") -> "Recipe":
        """Copy of `recipe` carrying the current scaled ingredients."""
        with self._lock:
            return recipe.model_copy(update={"ingredients": list(self.scaled_quantities)})
