from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..core.repository import RecipeRepository
from ..models.recipe import Recipe
from .dependencies import get_repository

router = APIRouter(prefix="/api/v1")


class RepositoryStatus(BaseModel):
    count: int
    modified: bool


def status_of(repository: RecipeRepository) -> RepositoryStatus:
    return RepositoryStatus(count=repository.count, modified=repository.is_modified)


@router.get("/recipes", response_model=List[Recipe])
def list_recipes(repository: RecipeRepository = Depends(get_repository)):
    return repository.get_all()


@router.get("/recipes/{index}", response_model=Recipe)
def get_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    return repository.get_at(index)


@router.delete("/recipes/{index}", status_code=204)
def delete_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    repository.delete(index)


@router.post("/recipes/load", response_model=RepositoryStatus)
def load_recipes(repository: RecipeRepository = Depends(get_repository)):
    repository.load()
    return status_of(repository)


@router.post("/recipes/save", response_model=RepositoryStatus)
def save_recipes(repository: RecipeRepository = Depends(get_repository)):
    repository.save()
    return status_of(repository)
