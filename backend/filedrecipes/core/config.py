from functools import lru_cache
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    recipes_path: str = "recipes.txt"
    # utf-8-sig reads files with or without a byte order mark
    recipes_encoding: str = "utf-8-sig"
    save_encoding: str = "utf-8"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {
        "env_file": ".env",
        "env_prefix": "",
        "extra": "ignore",
    }

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
