import uuid
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .measurement.catalog import UnitSystem
from .services.scaling import ScalingEngine, render_ingredients
from .services.unit_conversion import UnitConverter


class Recipe(BaseModel):
    """
    Recipe as handed over by the data store. `original_ingredients` is the
    unscaled baseline; it defaults to `ingredients` when not supplied.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    image: Optional[str] = None
    ingredients: List[str] = []
    instructions: List[str] = []
    original_ingredients: List[str] = []

    @model_validator(mode="after")
    def _default_originals(self):
        if not self.original_ingredients:
            self.original_ingredients = list(self.ingredients)
        return self

    def scaled(self, factor: float, engine: Optional[ScalingEngine] = None) -> "Recipe":
        engine = engine or ScalingEngine()
        return self.model_copy(update={"ingredients": engine.scale_many(self.ingredients, factor)})

    def scaled_by_ingredient(
        self,
        index: int,
        target_value: float,
        engine: Optional[ScalingEngine] = None,
    ) -> Optional["Recipe"]:
        """Scale so ingredient `index` reaches `target_value`; None if impossible."""
        if not 0 <= index < len(self.ingredients):
            return None
        engine = engine or ScalingEngine()
        factor = engine.factor_from_target(self.ingredients[index], target_value)
        if factor is None:
            return None
        return self.scaled(factor, engine)

    def converted(
        self,
        target_system: UnitSystem,
        converter: Optional[UnitConverter] = None,
    ) -> "Recipe":
        """Ingredients re-expressed in `target_system`, always from the originals."""
        ingredients = render_ingredients(
            self.original_ingredients, target_system=target_system, converter=converter
        )
        return self.model_copy(update={"ingredients": ingredients})
