"""
Application settings, read from ``HOTEL_*`` environment variables or a
``.env`` file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Hotel Service"

    # single connection string for the backing store
    database_url: str = "sqlite:///./hotels.db"

    log_level: str = "INFO"

    # per client address, slowapi limit syntax
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True

    model_config = SettingsConfigDict(env_prefix="HOTEL_", env_file=".env")


settings = Settings()
