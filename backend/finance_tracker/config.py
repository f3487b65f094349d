"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


INSECURE_JWT_SECRET = "CHANGE_ME"


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Finance Tracker"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/finance.sqlite"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: float = 10.0  # Seconds to wait for a pooled connection

    # Auth
    jwt_secret: str = INSECURE_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 24

    # Server
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def uses_insecure_secret(self) -> bool:
        return self.jwt_secret == INSECURE_JWT_SECRET


# Global settings instance
settings = Settings()
