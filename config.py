from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from functools import lru_cache
from typing import List, Optional

BASE_DIR = Path(__file__).resolve().parent
ENV_PATH = BASE_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    APP_TITLE: str = "Sched_Conflict"

    # DEBUG, INFO, WARNING, ERROR
    LOG_LEVEL: str = "INFO"
    # File logging is off unless a directory is given
    LOG_DIR: Optional[Path] = None

    # or ["http://127.0.0.1:8000"] for the front-end
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])


@lru_cache()
def get_settings() -> Settings:
    return Settings()
