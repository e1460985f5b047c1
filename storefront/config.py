"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DB_ACCESS_TOKEN accepted for the signing secret so existing deployments keep their env
    - Atlas URI assembled from DB_USER / DB_PASSWORD / DB_CLUSTER when an explicit
      MONGODB_URI is not provided
"""

from functools import lru_cache
from typing import Literal
from urllib.parse import quote_plus

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MONGODB_URI = "mongodb://localhost:27017"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Storage
    mongodb_uri: str = DEFAULT_MONGODB_URI
    mongodb_database: str = "vituGlow"
    db_user: str | None = None
    db_password: str | None = None
    db_cluster: str | None = None

    users_collection: str = "users"
    products_collection: str = "products"
    orders_collection: str = "orders"

    # Session token
    token_secret: str = Field(
        "change-me",
        validation_alias=AliasChoices("token_secret", "db_access_token"),
    )
    token_ttl_days: int = 365
    token_algorithm: str = "HS256"

    # Catalog
    allow_negative_stock: bool = True

    # API
    environment: Literal["development", "production", "test"] = "development"
    cors_origins: list[str] = ["http://localhost:5173"]
    port: int = 5000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def assemble_atlas_uri(self) -> "Settings":
        """Build an SRV URI from credentials when no explicit URI was given."""
        if (
            self.mongodb_uri == DEFAULT_MONGODB_URI
            and self.db_user and self.db_password and self.db_cluster
        ):
            self.mongodb_uri = (
                f"mongodb+srv://{quote_plus(self.db_user)}:"
                f"{quote_plus(self.db_password)}@{self.db_cluster}/"
                "?retryWrites=true&w=majority"
            )
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
