"""Application configuration module."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    public_dir: Path = Field(default=PACKAGE_DIR / "public", alias="PUBLIC_DIR")
    cors_origins: List[str] = Field(
        default=[
            "http://127.0.0.1:3000",
            "http://localhost:3000",
            "http://127.0.0.1:8000",
            "http://localhost:8000",
        ],
        alias="CORS_ORIGINS",
    )

    bcrypt_rounds: int = Field(default=12, ge=4, le=31, alias="BCRYPT_ROUNDS")
    seed_data: bool = Field(default=True, alias="SEED_DATA")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        """Stack traces are only disclosed to clients in development mode."""
        return self.app_env.strip().lower() in {"development", "dev"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
