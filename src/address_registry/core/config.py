"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./address_registry.db",
        description="SQLAlchemy connection string for the region and address store",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL statements (debugging only)",
    )

    # Import
    import_batch_size: int = Field(
        default=1000,
        description="Addresses per store write batch",
        gt=0,
    )
    import_progress_interval: int = Field(
        default=40000,
        description="Log import progress every N imported addresses",
        gt=0,
    )

    # Regions
    region_root_name: str = Field(
        default="中国",
        description="Name the top-level region of an imported tree must carry",
    )

    @field_validator("region_root_name")
    @classmethod
    def validate_region_root_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "region_root_name must not be blank"
            raise ValueError(msg)
        return v

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
