"""Application settings and configuration helpers."""
from functools import lru_cache
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    database_url: str = Field(
        default="sqlite+aiosqlite:///./staffdesk.db", alias="DATABASE_URL"
    )
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Optional bootstrap administrator, created at startup when missing
    admin_username: str | None = Field(default=None, alias="ADMIN_USERNAME")
    admin_password: str | None = Field(default=None, alias="ADMIN_PASSWORD")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def allowed_origins(self) -> list[str]:
        """Split the comma-separated CORS setting."""

        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


_ENV_NAMES = tuple(field.alias for field in Settings.model_fields.values() if field.alias)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings.model_validate(
        {name: os.environ[name] for name in _ENV_NAMES if name in os.environ}
    )
