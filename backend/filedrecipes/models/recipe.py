from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    amount: str
    measure: str
    name: str

    def clone(self) -> Ingredient:
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return f"{self.amount} {self.measure} {self.name}"


class Recipe(BaseModel):
    """
    A named recipe with its ingredients and instruction lines, both kept in
    the order they were added.
    """

    name: str = Field(min_length=1, frozen=True)
    ingredients: List[Ingredient] = []
    instructions: List[str] = []

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        self.instructions.append(instruction)

    def clone(self) -> Recipe:
        """Deep copy; the clone shares no lists or ingredients with self."""
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return self.name
