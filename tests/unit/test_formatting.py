"""Unit tests for recipe formatting."""
from core.formatting import (
    format_drink,
    format_ingredient,
    format_no_results,
    format_search_results,
)
from core.models import Drink, Ingredient


def _bullets(text):
    return [line for line in text.splitlines() if line.startswith("• ")]


def test_format_drink_layout(margarita):
    text = format_drink(Drink.from_api(margarita))
    assert text == (
        "🍸 Margarita 🍸\n"
        "-----------------\n"
        "Category: Ordinary Drink\n"
        "Glass: Cocktail glass\n"
        "Alcoholic: Alcoholic\n"
        "\n"
        "Ingredients:\n"
        "• 1 1/2 oz Tequila\n"
        "• 1/2 oz Triple sec\n"
        "• 1 oz Lime juice\n"
        "• Salt\n"
        "\n"
        "Instructions:\n"
        "Rub the rim of the glass with the lime slice to make the salt stick to it."
    )


def test_single_ingredient_with_absent_next_slot(gin_fizz):
    text = format_drink(Drink.from_api({**gin_fizz, "strIngredient2": None, "strMeasure2": "1 oz"}))
    assert _bullets(text) == ["• 2 oz Gin"]


def test_ingredient_only_in_later_slot_has_no_measure_prefix():
    text = format_drink(Drink.from_api({"strDrink": "Lime Water", "strIngredient3": "Lime"}))
    assert _bullets(text) == ["• Lime"]


def test_format_ingredient_trims_measure_and_line():
    assert format_ingredient(Ingredient(name="Gin", measure="  2 oz \n")) == "2 oz Gin"
    assert format_ingredient(Ingredient(name="Ice")) == "Ice"
    assert format_ingredient(Ingredient(name="Soda", measure="   ")) == "Soda"


def test_format_drink_is_pure(margarita):
    drink = Drink.from_api(margarita)
    assert format_drink(drink) == format_drink(drink)


def test_format_search_results_joins_with_blank_line(margarita, gin_fizz):
    drinks = [Drink.from_api(margarita), Drink.from_api(gin_fizz)]
    text = format_search_results("ar", drinks)
    header, rest = text.split("\n\n", 1)
    assert header == 'Found 2 cocktail(s) matching "ar":'
    assert rest == format_drink(drinks[0]) + "\n\n" + format_drink(drinks[1])


def test_format_no_results():
    assert format_no_results("Zzz") == 'No cocktails found matching "Zzz". Try a different search term.'
