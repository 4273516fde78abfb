from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="PageBuilder", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # Database
    database_url: str = Field(default="sqlite:///./pages.db", validation_alias="DATABASE_URL")
    database_echo: bool = Field(default=False, validation_alias="DATABASE_ECHO")
    pages_table: str = Field(default="pages", validation_alias="PAGES_TABLE")
    page_translations_table: str = Field(
        default="page_translations",
        validation_alias="PAGE_TRANSLATIONS_TABLE",
    )
    page_translation_foreign_key: str = Field(
        default="page_id",
        validation_alias="PAGE_TRANSLATION_FOREIGN_KEY",
    )

    # Languages, locale code -> display label (JSON object in the environment)
    active_languages: dict[str, str] = Field(
        default_factory=lambda: {"en": "English"},
        validation_alias="ACTIVE_LANGUAGES",
    )

    # Duplication
    max_label_attempts: int = Field(default=1000, ge=1, validation_alias="MAX_LABEL_ATTEMPTS")

    # Rendered page cache
    render_cache_backend: Literal["file", "memory"] = Field(
        default="file",
        validation_alias="RENDER_CACHE_BACKEND",
    )
    render_cache_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "cache" / "pages",
        validation_alias="RENDER_CACHE_DIR",
    )


# Global settings instance
settings = Settings()
