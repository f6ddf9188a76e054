import os
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_version() -> str:
    """Read version from environment variable or pyproject.toml."""
    if env_version := os.getenv("CMDLOG_VERSION"):
        return env_version

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        for line in pyproject_path.read_text().split("\n"):
            if line.startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    return "0.0.0-dev"


APP_VERSION = _get_version()


class Settings(BaseSettings):
    # Database
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "cmdlog"
    POSTGRES_PASSWORD: str = "devpassword"
    POSTGRES_DB: str = "cmdlog"

    # Full SQLAlchemy URL, e.g. sqlite+aiosqlite:///./cmdlog.db
    DATABASE_URL: str | None = None

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # App
    APP_NAME: str = "cmdlog"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Requests
    MAX_REQUEST_SIZE: int = 1024 * 1024
    ENFORCE_JSON_CONTENT_TYPE: bool = False
    CORS_ALLOW_ORIGINS: list[str] = []

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level

    @field_validator("DATABASE_URL")
    @classmethod
    def strip_database_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
