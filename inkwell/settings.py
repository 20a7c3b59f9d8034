from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content"
    PERMALINK_PATTERN: str = "/:year/:month/:day/:slug/"
    DEFAULT_SORT_ORDER: str = "desc"
    READING_WPM: int = Field(200, gt=0)

    # Site
    BASE_URL: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key (empty leaves the API open)
    INKWELL_API_KEY: str = ""

    def absolute_url(self, address: str) -> str:
        return f"{self.BASE_URL.rstrip('/')}{address}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
