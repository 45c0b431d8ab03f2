"""Runtime settings for the Bookmarks API, read from the environment."""
from functools import lru_cache
from urllib.parse import urlparse

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings. Field aliases are the environment variable names."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str

    # Static bearer token expected on every bookmark request
    api_token: str = Field(default="", validation_alias="API_TOKEN")

    # Skips the token check; only accepted against a local database
    dev_mode: bool = Field(default=False, validation_alias="DEV_MODE")

    # Comma-separated browser origins, split by `cors_origins`
    cors_origins_str: str = Field(
        default="http://localhost:3000",
        validation_alias="CORS_ORIGINS",
    )

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @model_validator(mode="after")
    def reject_dev_mode_on_remote_database(self) -> "Settings":
        """Refuse DEV_MODE unless DATABASE_URL is SQLite or a loopback host."""
        if not self.dev_mode:
            return self

        parsed = urlparse(self.database_url)
        if parsed.scheme.startswith("sqlite"):
            return self

        hostname = parsed.hostname or ""
        local_hosts = {"localhost", "127.0.0.1", "0.0.0.0", "::1"}
        if hostname.lower() not in local_hosts:
            raise ValueError(
                f"DEV_MODE cannot be enabled with a non-local database "
                f"(host '{hostname}'). Unset DEV_MODE or point DATABASE_URL at "
                f"localhost or SQLite.",
            )

        return self

    @property
    def cors_origins(self) -> list[str]:
        """Allowed origins, blanks dropped."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; tests call `cache_clear()`."""
    return Settings()
