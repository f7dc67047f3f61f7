"""LabelCraft configuration — loaded from environment / .env file."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="LABELCRAFT_", extra="ignore")

    env: str = "development"
    database_url: str = "sqlite+aiosqlite:///./labelcraft.db"
    log_level: str = "INFO"

    # Comma-separated list of allowed origins; empty or "*" allows everything
    cors_origins: str = ""

    # Gemini text generation
    gemini_api_key: str = Field(
        "", validation_alias=AliasChoices("LABELCRAFT_GEMINI_API_KEY", "GEMINI_API_KEY")
    )
    gemini_model: str = "gemini-2.5-flash"

    labels_page_size: int = 50

    @property
    def allowed_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        if not origins or "*" in origins:
            return ["*"]
        return origins


settings = Settings()
