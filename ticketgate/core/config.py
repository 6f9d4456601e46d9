# ticketgate/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./tickets.db")
    DATABASE_SSL: bool = False
    APP_NAME: str = "Ticketgate"
    APP_DESC: str = "Event ticket issuance and lookup"
    APP_VERSION: str = "1.0.0"

    # Public URL the ticket links point at (Render sets RENDER_EXTERNAL_URL)
    EXTERNAL_URL: str | None = Field(
        default=None,
        validation_alias=AliasChoices("EXTERNAL_URL", "RENDER_EXTERNAL_URL"),
    )
    PORT: int = 10000

    # Token authority for the client-credentials check
    AUTH_DOMAIN: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTH_DOMAIN", "DOMAIN"),
    )
    AUTH_TIMEOUT: float = 10.0

    TICKET_CAP: int = 3
    AUTO_MIGRATE: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS origins, comma separated
    CORS_ORIGINS: str = "*"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def base_url(self) -> str:
        return self.EXTERNAL_URL or f"https://localhost:{self.PORT}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
