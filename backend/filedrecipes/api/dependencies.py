"""Shared FastAPI dependencies."""

from functools import lru_cache

from ..core.config import get_settings
from ..core.repository import RecipeRepository


@lru_cache()
def get_repository() -> RecipeRepository:
    """Return the process-wide repository for the configured recipe file."""
    settings = get_settings()
    return RecipeRepository(
        settings.recipes_path,
        encoding=settings.recipes_encoding,
        save_encoding=settings.save_encoding,
    )
