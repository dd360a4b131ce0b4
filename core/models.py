# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These types define the shape of everything that flows through a tool call:
#
#   ToolDescriptor   - what the catalog advertises (name, description, schema)
#   SearchArguments  - validated input for get_cocktail
#   ArgumentError    - the failure arm of argument validation
#   Ingredient/Drink - a CocktailDB recipe, decoded from its flat JSON record
#   ResponseEnvelope - the one thing every invocation returns
#
# Dataclasses are frozen: a descriptor is created once at import time and an
# envelope is built in a single step, so neither is ever partially filled in.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# CocktailDB spreads ingredients over strIngredient1..15 / strMeasure1..15.
MAX_INGREDIENT_SLOTS = 15


# -----------------------------------------------------------------------------
# ToolDescriptor - the catalog entry for a callable tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """A named, schema-described tool as advertised on discovery."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the MCP wire shape (note the camelCase inputSchema key)."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


# -----------------------------------------------------------------------------
# SearchArguments - input for get_cocktail
# -----------------------------------------------------------------------------
# Strict mode: a number or a list for "name" is rejected instead of coerced.
# -----------------------------------------------------------------------------
class SearchArguments(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = Field(description="Cocktail name to search for")


@dataclass(frozen=True)
class ArgumentError:
    """Why raw tool arguments did not match SearchArguments."""

    message: str


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts) or str(exc)


def parse_arguments(raw: Any) -> Union[SearchArguments, ArgumentError]:
    """Validate untyped tool arguments.

    Returns a SearchArguments on success or an ArgumentError describing every
    problem found.  Never raises for bad input.
    """
    try:
        return SearchArguments.model_validate(raw)
    except ValidationError as exc:
        return ArgumentError(_describe_validation_error(exc))


# -----------------------------------------------------------------------------
# Drink - one recipe from CocktailDB
# -----------------------------------------------------------------------------
# The upstream record is flat and sparse: strIngredient2 may be null while
# strIngredient3 is set.  from_api() folds the numbered slots into an ordered
# tuple, keeping slot order and dropping slots without an ingredient name.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Ingredient:
    """One ingredient line.  measure is None when CocktailDB omits it."""

    name: str
    measure: Optional[str] = None


@dataclass(frozen=True)
class Drink:
    """A cocktail recipe as returned by search.php."""

    name: Optional[str]
    category: Optional[str] = None
    glass: Optional[str] = None
    alcoholic: Optional[str] = None
    instructions: Optional[str] = None
    ingredients: tuple[Ingredient, ...] = ()

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "Drink":
        ingredients = []
        for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
            ingredient = record.get(f"strIngredient{slot}")
            if not ingredient:
                continue
            ingredients.append(
                Ingredient(name=ingredient, measure=record.get(f"strMeasure{slot}") or None)
            )

        return cls(
            name=record.get("strDrink"),
            category=record.get("strCategory"),
            glass=record.get("strGlass"),
            alcoholic=record.get("strAlcoholic"),
            instructions=record.get("strInstructions"),
            ingredients=tuple(ingredients),
        )


# -----------------------------------------------------------------------------
# ResponseEnvelope - uniform result of every invocation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ResponseEnvelope:
    """Success or error result carrying exactly one text item."""

    is_error: bool
    content: tuple[TextContent, ...]

    @classmethod
    def success(cls, text: str) -> "ResponseEnvelope":
        return cls(is_error=False, content=(TextContent(text),))

    @classmethod
    def failure(cls, text: str) -> "ResponseEnvelope":
        return cls(is_error=True, content=(TextContent(text),))

    @property
    def text(self) -> str:
        return self.content[0].text

    def to_dict(self) -> dict[str, Any]:
        return {
            "isError": self.is_error,
            "content": [{"type": item.type, "text": item.text} for item in self.content],
        }
