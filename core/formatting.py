# =============================================================================
# core/formatting.py  -  Recipe rendering
# =============================================================================
#
# Turns decoded Drink records into the plain text an agent reads back.  Every
# function here is pure: same input, same output, no I/O.
# =============================================================================

from core.models import Drink, Ingredient

SEPARATOR = "-----------------"
GLYPH = "🍸"


def format_ingredient(ingredient: Ingredient) -> str:
    """'<measure> <name>' with the whole line trimmed.

    A missing measure renders as an empty prefix, so "Lime" alone stays "Lime".
    """
    measure = ingredient.measure.strip() if ingredient.measure else ""
    return f"{measure} {ingredient.name}".strip()


def format_drink(drink: Drink) -> str:
    """Render one recipe block."""
    bullets = "\n".join(f"• {format_ingredient(i)}" for i in drink.ingredients)

    block = f"""
{GLYPH} {drink.name} {GLYPH}
{SEPARATOR}
Category: {drink.category}
Glass: {drink.glass}
Alcoholic: {drink.alcoholic}

Ingredients:
{bullets}

Instructions:
{drink.instructions}
"""
    return block.strip()


def format_no_results(name: str) -> str:
    return f'No cocktails found matching "{name}". Try a different search term.'


def format_search_results(name: str, drinks: list[Drink]) -> str:
    """Summary line, a blank line, then every recipe separated by a blank line."""
    recipes = "\n\n".join(format_drink(drink) for drink in drinks)
    return f'Found {len(drinks)} cocktail(s) matching "{name}":\n\n{recipes}'
