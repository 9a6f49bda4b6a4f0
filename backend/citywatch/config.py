"""CityWatch settings, read from env vars (e.g. ENFORCE_WRITE_SCOPE) or a .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Source path, access policy and HTTP surface for one process."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Source table (read-only CSV with a header row)
    incidents_csv_path: str = "data/incidents.csv"

    # Access policy: when true a role may only change the status of
    # incidents it can see. False reproduces the legacy dashboard, where any
    # non-public role could update any incident.
    enforce_write_scope: bool = True

    # HTTP surface
    api_v1_prefix: str = "/api/v1"
    cors_origins: list[str] = ["*"]  # Restrict in production
    login_rate_limit: str = "10/minute"

    # Process
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """One Settings per process; tests override the store, not this."""
    return Settings()
