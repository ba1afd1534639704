import pytest
from whisker.measurement.catalog import UnitSystem
from whisker.models import Recipe
from whisker.services.scaling import ScalingEngine, render_ingredients

engine = ScalingEngine()


def test_double_cups():
    assert engine.scale_one("2 cups flour", 2.0) == "4 cups flour"


def test_halve_to_fraction():
    assert engine.scale_one("1 cup sugar", 0.5) == "½ cup sugar"


def test_mixed_number_scaled():
    assert engine.scale_one("1 1/2 cups milk", 2) == "3 cups milk"


def test_unit_words_kept_verbatim():
    # Scaling never re-picks the unit, even when the value grows past 1
    assert engine.scale_one("1 cup milk", 3) == "3 cup milk"
    assert engine.scale_one("4 oz. cream cheese", 1.5) == "6 oz. cream cheese"


def test_bare_count_and_can_size():
    assert engine.scale_one("2 large eggs", 1.5) == "3 large eggs"
    assert engine.scale_one("1 (14 oz) can tomatoes", 2) == "2 (28 oz) can tomatoes"


def test_sizes_and_temperatures_not_scaled():
    assert engine.scale_one("1 lb chicken, cut into 2 inch pieces", 2) == "2 lb chicken, cut into 2 inch pieces"
    assert engine.scale_one("1 cup water, heated to 110 degrees", 2) == "2 cup water, heated to 110 degrees"


def test_no_measurement_unchanged():
    assert engine.scale_one("Salt to taste", 3) == "Salt to taste"


@pytest.mark.parametrize("text", [
    "2 cups flour",
    "1 1/2 cups milk",
    "2.50 g saffron",
    "1½ tbsp butter",
    "Salt to taste",
    "",
])
def test_identity_at_factor_one(text):
    assert engine.scale_one(text, 1.0) == text


def test_scale_to_decimal():
    assert engine.scale_one("3 tbsp oil", 0.7) == "2.1 tbsp oil"


def test_scale_many():
    lines = ["2 cups flour", "1 tsp salt", "Pepper to taste"]
    assert engine.scale_many(lines, 2) == ["4 cups flour", "2 tsp salt", "Pepper to taste"]


def test_factor_from_target():
    assert engine.factor_from_target("2 cups flour", 4.0) == 2.0
    assert engine.factor_from_target("½ cup sugar", 1.0) == 2.0


def test_factor_from_target_uses_first_measurement():
    assert engine.factor_from_target("1 lb beef or 500 g", 2) == 2.0


def test_factor_from_target_fails():
    assert engine.factor_from_target("Salt to taste", 2.0) is None
    assert engine.factor_from_target("0 cups water", 2.0) is None


def test_render_converts_then_scales():
    lines = render_ingredients(["2 cups flour", "2 large eggs"], factor=2, target_system=UnitSystem.METRIC)
    assert lines == ["946.36 ml flour", "4 large eggs"]


def test_render_defaults_to_originals():
    lines = ["2 cups flour"]
    assert render_ingredients(lines) == lines


# --- Recipe ---

def _pancakes():
    return Recipe(name="Pancakes", ingredients=["2 cups flour", "1 cup milk", "Pinch of salt"])


def test_recipe_defaults_original_ingredients():
    recipe = _pancakes()
    assert recipe.original_ingredients == recipe.ingredients


def test_recipe_scaled():
    recipe = _pancakes()
    doubled = recipe.scaled(2)
    assert doubled.ingredients == ["4 cups flour", "2 cup milk", "Pinch of salt"]
    assert doubled.id == recipe.id
    assert recipe.ingredients[0] == "2 cups flour"


def test_recipe_scaled_by_ingredient():
    scaled = _pancakes().scaled_by_ingredient(0, 3.0)
    assert scaled.ingredients[:2] == ["3 cups flour", "1½ cup milk"]


def test_recipe_scaled_by_ingredient_impossible():
    recipe = _pancakes()
    assert recipe.scaled_by_ingredient(5, 3.0) is None
    assert recipe.scaled_by_ingredient(2, 3.0) is None


def test_recipe_converted_from_originals():
    recipe = _pancakes().scaled(2)
    metric = recipe.converted(UnitSystem.METRIC)
    assert metric.ingredients == ["473.18 ml flour", "236.59 ml milk", "Pinch of salt"]
    assert metric.original_ingredients == ["2 cups flour", "1 cup milk", "Pinch of salt"]

    back = metric.converted(UnitSystem.IMPERIAL)
    assert back.ingredients == metric.original_ingredients
