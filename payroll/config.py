from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite:///./payroll.db"
    db_echo: bool = False
    seed_database: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    base_url: Optional[str] = None

    # Application
    app_name: str = "Payroll Service"
    debug: bool = False
    log_level: str = "INFO"


# Global settings instance
settings = Settings()


def get_database_url() -> str:
    return settings.database_url


def get_base_url(default: str) -> str:
    """Return the externally reachable base URL used in response links."""
    return (settings.base_url or default).rstrip("/")
