import logging
from enum import Enum
from typing import List, Optional

from pydantic import ValidationError

from ..models.recipe import Ingredient, Recipe
from .errors import MalformedFormatError

log = logging.getLogger(__name__)

SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"

INGREDIENT_DELIMITER = ";"


class ReadStatus(str, Enum):
    INDEFINITE = "indefinite"
    NEW = "new"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


MARKERS = {
    SECTION_RECIPE: ReadStatus.NEW,
    SECTION_INGREDIENTS: ReadStatus.INGREDIENT,
    SECTION_INSTRUCTIONS: ReadStatus.INSTRUCTION,
}


class RecipeStateMachine:
    """
    Reads a recipe file one line at a time.

    Marker lines switch the section; every other line is interpreted by the
    current section and lands on the recipe most recently named. Recipes are
    collected in a working list that only becomes visible to callers once
    the whole stream has been handled.
    """

    def __init__(self, source: Optional[str] = None) -> None:
        self.source = source
        self.status = ReadStatus.INDEFINITE
        self.recipes: List[Recipe] = []
        self.current: Optional[Recipe] = None
        self.line_number = 0

    def handle(self, line: str) -> None:
        self.line_number += 1

        status = MARKERS.get(line)
        if status is not None:
            self.status = status
            if status == ReadStatus.NEW:
                # A fresh recipe block owns nothing until its name is read.
                self.current = None
            return

        if self.status == ReadStatus.NEW:
            self._new_recipe(line)
        elif self.status == ReadStatus.INGREDIENT:
            self._current_recipe(line).add_ingredient(self._ingredient(line))
        elif self.status == ReadStatus.INSTRUCTION:
            self._current_recipe(line).add_instruction(line)
        else:
            raise self._error("content before the first recipe marker", line)

    def _new_recipe(self, line: str) -> None:
        try:
            recipe = Recipe(name=line)
        except ValidationError as e:
            raise self._error("recipe name must not be empty", line) from e
        self.recipes.append(recipe)
        self.current = recipe
        log.debug(f"Line {self.line_number}: new recipe '{line}'")

    def _current_recipe(self, line: str) -> Recipe:
        if self.current is None:
            raise self._error("section does not belong to a named recipe", line)
        return self.current

    def _ingredient(self, line: str) -> Ingredient:
        parts = line.split(INGREDIENT_DELIMITER)
        if len(parts) != 3:
            raise self._error(
                f"ingredient needs 3 fields separated by '{INGREDIENT_DELIMITER}', got {len(parts)}",
                line,
            )
        amount, measure, name = parts
        return Ingredient(amount=amount, measure=measure, name=name)

    def _error(self, reason: str, line: str) -> MalformedFormatError:
        return MalformedFormatError(
            reason,
            path=self.source,
            line_number=self.line_number,
            line=line,
            section=self.status.value,
        )
