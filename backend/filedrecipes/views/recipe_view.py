import sys
from typing import Iterable, List, Optional, TextIO, Union

from ..models.recipe import Recipe


class RecipeView:
    """Console rendering of recipes. Only reads the recipes it is given."""

    def __init__(self, stream: Optional[TextIO] = None, width: int = 60) -> None:
        self.stream = stream
        self.width = width

    def header_panel(self, header: str) -> List[str]:
        inner = max(self.width - 4, len(header))
        return [
            "╔" + "═" * (inner + 2) + "╗",
            "║ " + header.center(inner) + " ║",
            "╚" + "═" * (inner + 2) + "╝",
        ]

    def render(self, recipe: Recipe) -> str:
        lines = self.header_panel(recipe.name)
        lines += ["", "Ingredienser", "============="]
        lines += [str(ingredient) for ingredient in recipe.ingredients]
        lines += ["", "Instruktioner", "=============="]
        lines += recipe.instructions
        return "\n".join(lines) + "\n"

    def show(self, recipes: Union[Recipe, Iterable[Recipe]]) -> None:
        out = self.stream or sys.stdout
        if isinstance(recipes, Recipe):
            recipes = [recipes]
        for i, recipe in enumerate(recipes):
            if i:
                out.write("\n")
            out.write(self.render(recipe))
