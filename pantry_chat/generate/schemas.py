# Structured output schemas and their text renderers.

from __future__ import annotations
import json
import re
from typing import Dict, List

from pydantic import BaseModel

from .types import OutputSchema

ITEM_SEPARATOR = "\n\n---\n\n"
INGREDIENT_SEPARATOR = ", "
NO_RECIPES = "No recipes found."
_NAME_LINE = re.compile(r"^\*\*(.*)\*\*$")
_decoder = json.JSONDecoder()


class Recipe(BaseModel):
    recipeName: str
    ingredients: List[str]
    instructions: str


RECIPES_JSON_SCHEMA = {
    "description": "List of recipes based on leftover food items",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "recipeName": {"type": "string"},
            "ingredients": {"type": "array", "items": {"type": "string"}},
            "instructions": {"type": "string"},
        },
        "required": ["recipeName", "ingredients", "instructions"],
    },
}


def _quote_ingredient(item: str) -> str:
    # bare unless it would be ambiguous once joined
    if not item or INGREDIENT_SEPARATOR in item or item.startswith('"') or "\n" in item:
        return json.dumps(item, ensure_ascii=False)
    return item


def _split_ingredients(line: str) -> List[str]:
    items: List[str] = []
    pos = 0
    while pos < len(line):
        if line.startswith('"', pos):
            item, pos = _decoder.raw_decode(line, pos)
        else:
            end = line.find(INGREDIENT_SEPARATOR, pos)
            end = len(line) if end == -1 else end
            item, pos = line[pos:end], end
        items.append(item)
        if pos < len(line):
            if not line.startswith(INGREDIENT_SEPARATOR, pos):
                raise ValueError(f"Bad ingredient list: {line!r}")
            pos += len(INGREDIENT_SEPARATOR)
            if pos == len(line):
                raise ValueError(f"Bad ingredient list: {line!r}")
    return items


def format_recipes(recipes: List[dict]) -> str:
    """Render validated recipes as one text block per recipe, in order.

    Ingredients are joined with ", "; an ingredient that is empty, contains
    ", " or a newline, or starts with a quote is written as a JSON string.
    """
    if not recipes:
        return NO_RECIPES
    blocks = []
    for r in recipes:
        ingredients = INGREDIENT_SEPARATOR.join(_quote_ingredient(i) for i in r["ingredients"])
        blocks.append(
            f"**{r['recipeName']}**\n"
            f"Ingredients: {ingredients}\n"
            f"Instructions: {r['instructions']}"
        )
    return ITEM_SEPARATOR.join(blocks)


def parse_recipes(text: str) -> List[dict]:
    """Recover recipe fields from text produced by format_recipes."""
    if text == NO_RECIPES:
        return []
    out = []
    for block in text.split(ITEM_SEPARATOR):
        lines = block.split("\n")
        m = _NAME_LINE.match(lines[0])
        if not m or len(lines) < 3 or not lines[1].startswith("Ingredients: "):
            raise ValueError(f"Not a rendered recipe block: {block!r}")
        out.append({
            "recipeName": m.group(1),
            "ingredients": _split_ingredients(lines[1].removeprefix("Ingredients: ")),
            "instructions": "\n".join(lines[2:]).removeprefix("Instructions: "),
        })
    return out


RECIPES = OutputSchema(
    name="recipe",
    description=RECIPES_JSON_SCHEMA["description"],
    json_schema=RECIPES_JSON_SCHEMA,
    type_=list[Recipe],
    render=format_recipes,
)

SCHEMAS: Dict[str, OutputSchema] = {"recipes": RECIPES}
