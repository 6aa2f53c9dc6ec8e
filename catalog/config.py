"""Application configuration using Pydantic Settings.

Reads configuration from environment variables with sensible defaults.
Database credentials should be provided via environment variables or `.env`.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    service_name: str = Field(
        default="catalog-api",
        description="Service name attached to logs and database connections",
    )
    environment: Literal["prod", "staging", "dev"] = Field(
        default="dev",
        description="Environment name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )

    # =========================================================================
    # Database (PostgreSQL)
    # =========================================================================
    db_user: str = Field(
        default="postgres",
        description="Database user",
    )
    db_password: str = Field(
        default="",
        description="Database password",
    )
    db_name: str = Field(
        default="catalog",
        description="Database name",
    )
    db_host: str = Field(
        default="localhost",
        description="Database host",
    )
    db_port: int = Field(
        default=5432,
        description="Database port",
    )
    db_pool_size: int = Field(
        default=5,
        description="Database connection pool size",
    )
    db_pool_max_overflow: int = Field(
        default=10,
        description="Max overflow connections beyond pool size",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the products database."""
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    # =========================================================================
    # Catalog API client
    # =========================================================================
    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the product API consumed by the views",
    )
    api_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Product API request timeout in seconds",
    )

    # =========================================================================
    # Table views
    # =========================================================================
    page_size: int = Field(
        default=5,
        gt=0,
        description="Rows per page in the table views",
    )
    currency_symbol: str = Field(
        default="Rp",
        description="Currency symbol prefixed to formatted prices",
    )
    print_title: str = Field(
        default="Data Produk",
        description="Title of the printable product list",
    )
    table_stock_thresholds: tuple[int, int] = Field(
        default=(10, 50),
        description="Medium/high stock cut points for the table layout",
    )
    grid_stock_thresholds: tuple[int, int] = Field(
        default=(55, 70),
        description="Medium/high stock cut points for the grid layout",
    )
    mobile_stock_thresholds: tuple[int, int] = Field(
        default=(50, 80),
        description="Medium/high stock cut points for the mobile layout",
    )
    simple_stock_thresholds: tuple[int, int] = Field(
        default=(10, 50),
        description="Medium/high stock cut points for the simple list",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Output logs as JSON outside of dev",
    )
    log_library_levels: dict[str, str] = Field(
        default={
            "uvicorn.access": "WARNING",
            "httpx": "WARNING",
            "httpcore": "WARNING",
            "sqlalchemy.engine": "WARNING",
        },
        description="Log level per third-party logger name",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
