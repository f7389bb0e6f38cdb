"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "navitas-gateway"
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Partner authentication (comma-separated)
    partner_api_keys: str = ""

    # Navitas Connect API
    navitas_base_url: str = ""
    navitas_hmac_client_id: str = ""
    navitas_hmac_secret: str = ""
    navitas_api_token: str = ""
    navitas_timeout: float = 5.0
    navitas_user_agent: str = "NavitasGateway/1.0"

    # Upstream paths
    navitas_localities_path: str = "/v1/localities"
    navitas_submit_path_indirect: str = "/v1/application/submit"
    navitas_submit_path_direct: str = "/v1/application/submit"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

