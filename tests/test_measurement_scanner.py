import pytest
from whisker.measurement.scanner import (
    PATTERN_PRIORITY,
    PatternClass,
    extract_measurements,
    iter_candidates,
)


def test_priority_order():
    assert PATTERN_PRIORITY == (
        PatternClass.IMPERIAL_VOLUME,
        PatternClass.IMPERIAL_WEIGHT,
        PatternClass.METRIC_VOLUME,
        PatternClass.METRIC_WEIGHT,
        PatternClass.BARE_NUMBER,
    )


def test_simple_cups():
    matches = extract_measurements("2 cups flour")
    assert len(matches) == 1
    m = matches[0]
    assert m.value == 2.0
    assert m.unit.name == "cup"
    assert m.unit_text == "cups"
    assert m.span == (0, 6)
    assert m.quantity_span == (0, 1)
    assert m.pattern_class == PatternClass.IMPERIAL_VOLUME


def test_no_measurement_returns_none():
    assert extract_measurements("Salt to taste") is None
    assert extract_measurements("") is None


@pytest.mark.parametrize("text,value,unit", [
    ("1 1/2 cups milk", 1.5, "cup"),
    ("½ cup sugar", 0.5, "cup"),
    ("1½ tbsp butter", 1.5, "tablespoon"),
    ("2 ½ tsp salt", 2.5, "teaspoon"),
    ("1/4 tsp nutmeg", 0.25, "teaspoon"),
    ("2.5 kg potatoes", 2.5, "kilogram"),
    ("500 g flour", 500, "gram"),
    ("500g flour", 500, "gram"),
    ("1.5 l water", 1.5, "liter"),
    ("250 mL cream", 250, "milliliter"),
    ("8 fl oz cream", 8, "fluid ounce"),
    ("2 gal milk", 2, "gallon"),
    ("1 lb. ground beef", 1, "pound"),
    ("2 CUPS Flour", 2, "cup"),
    ("3 c. stock", 3, "cup"),
])
def test_single_unit_match(text, value, unit):
    matches = extract_measurements(text)
    assert len(matches) == 1
    assert matches[0].value == pytest.approx(value)
    assert matches[0].unit.name == unit


def test_mixed_number_span_covers_whole_literal():
    m = extract_measurements("1 1/2 cups milk")[0]
    assert m.span == (0, 10)
    assert m.quantity_span == (0, 5)


def test_bare_number():
    matches = extract_measurements("2 large eggs")
    assert len(matches) == 1
    assert matches[0].value == 2
    assert matches[0].unit_text == ""
    assert matches[0].unit is None
    assert matches[0].pattern_class == PatternClass.BARE_NUMBER


def test_unit_letter_inside_word_is_not_a_unit():
    # "l" of "lemons" and "g" of "garlic" must not be read as litres / grams
    assert extract_measurements("2 lemons")[0].unit_text == ""
    assert extract_measurements("3 garlic cloves")[0].unit_text == ""


def test_matches_are_ordered_by_position():
    matches = extract_measurements("1 lb ground beef and 2 cups rice")
    assert [m.value for m in matches] == [1, 2]
    assert [m.unit.name for m in matches] == ["pound", "cup"]
    assert matches[0].start < matches[1].start


def test_can_size_and_count():
    matches = extract_measurements("1 (14 oz) can tomatoes")
    assert [m.value for m in matches] == [1, 14]
    assert matches[0].pattern_class == PatternClass.BARE_NUMBER
    assert matches[1].unit.name == "ounce"


def test_unparsable_candidate_is_dropped():
    matches = extract_measurements("1/0 cup sugar and 2 tbsp oil")
    assert len(matches) == 1
    assert matches[0].unit.name == "tablespoon"


def test_number_inside_number_is_not_a_quantity():
    # Neither "1" (runs into ",") nor "000" (follows ",") is a quantity
    assert extract_measurements("1,000 g flour") is None


def test_bare_number_only_at_start_of_line():
    matches = extract_measurements("1 lb chicken, cut into 2 inch pieces")
    assert len(matches) == 1
    assert matches[0].unit.name == "pound"

    assert extract_measurements("Water, heated to 110 degrees") is None


def test_bare_number_after_leading_whitespace():
    matches = extract_measurements("  3 large eggs")
    assert len(matches) == 1
    assert matches[0].value == 3
    assert matches[0].span == (2, 3)


def test_matches_never_overlap():
    texts = [
        "1 1/2 cups milk",
        "2 ½ cups sugar",
        "1 (14 oz) can tomatoes",
        "8 fl oz cream and 2 oz cheese",
        "1 lb 4 oz pork shoulder",
        "3 large eggs, 1 cup milk, 500 g flour",
    ]
    for text in texts:
        matches = extract_measurements(text)
        for a, b in zip(matches, matches[1:]):
            assert a.end <= b.start, text


def test_iter_candidates_is_lazy_and_in_priority_order():
    candidates = iter_candidates("2 eggs and 1 cup milk")
    first = next(candidates)
    assert first.pattern_class == PatternClass.IMPERIAL_VOLUME
    rest = list(candidates)
    assert [c.pattern_class for c in rest] == [PatternClass.BARE_NUMBER]
