# jcr_lexicon/config.py
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LOG_LEVEL: str = "WARNING"

    # Namespace registry
    NAMESPACES_FILE: Optional[Path] = None
    INCLUDE_BUILTIN_NAMESPACES: bool = True

    class Config:
        env_prefix = "JCRLEX_"
        env_file = ".env"
        extra = "ignore"


def get_settings(**overrides) -> Settings:
    """Build settings from the environment, with explicit overrides taking precedence."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
