"""
Reads and writes the sectioned recipe text format:

    [Recept]
    Pannkakor
    [Ingredienser]
    2;dl;mjöl
    [Instruktioner]
    Blanda allt.
"""

import io
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional

from ..core.state_machine import (
    INGREDIENT_DELIMITER,
    SECTION_INGREDIENTS,
    SECTION_INSTRUCTIONS,
    SECTION_RECIPE,
    RecipeStateMachine,
)
from ..models.recipe import Ingredient, Recipe


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class RecipeParser:
    @classmethod
    def parse(cls, lines: Iterable[str], source: Optional[str] = None) -> List[Recipe]:
        """
        Parse lines (with or without their trailing newline) into recipes
        sorted by name. Raises MalformedFormatError on the first line that
        breaks the structure; `source` names the input in that error.
        """
        machine = RecipeStateMachine(source)
        for line in lines:
            machine.handle(_strip_newline(line))

        # sorted() is stable, recipes sharing a name keep their file order
        return sorted(machine.recipes, key=attrgetter("name"))

    @classmethod
    def parse_text(cls, raw: str) -> List[Recipe]:
        return cls.parse(io.StringIO(raw, newline=None))


class RecipeSerializer:
    @staticmethod
    def format_ingredient(ingredient: Ingredient) -> str:
        return INGREDIENT_DELIMITER.join((ingredient.amount, ingredient.measure, ingredient.name))

    @classmethod
    def lines(cls, recipes: Iterable[Recipe]) -> Iterator[str]:
        for recipe in recipes:
            yield SECTION_RECIPE
            yield recipe.name
            yield SECTION_INGREDIENTS
            for ingredient in recipe.ingredients:
                yield cls.format_ingredient(ingredient)
            yield SECTION_INSTRUCTIONS
            yield from recipe.instructions

    @classmethod
    def write(cls, recipes: Iterable[Recipe], stream: io.TextIOBase) -> None:
        for line in cls.lines(recipes):
            stream.write(line + "\n")

    @classmethod
    def to_text(cls, recipes: Iterable[Recipe]) -> str:
        buffer = io.StringIO()
        cls.write(recipes, buffer)
        return buffer.getvalue()
