"""
Service settings for the Pawnder taxonomy API.

Values come from environment variables (case-insensitive) or a local .env
file; anything unset falls back to the defaults below.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator


class Environment(str, Enum):
    """Deployment stage the service runs in"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Typed configuration for the API process.

    ``DATABASE_URL`` accepts any SQLAlchemy URL; a bare ``postgres://`` DSN is
    rewritten to the psycopg2 driver. Page sizes bound the catalog listing.
    """

    # Service identity
    app_name: str = Field(default="Pawnder Taxonomy", description="Service name reported by /health-check")
    app_version: str = Field(default="1.0.0", description="Service version reported by /health-check")
    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Deployment stage")
    debug: bool = Field(default=False, description="FastAPI debug tracebacks")

    # Uvicorn binding
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")

    # Persistence
    database_url: str = Field(
        default="postgresql+psycopg2://pawnder@localhost:5432/pawnder",
        description="SQLAlchemy URL of the taxonomy database",
    )
    db_echo: bool = Field(default=False, description="Log every SQL statement")
    db_init_attempts: int = Field(default=8, ge=1, description="Schema creation attempts at startup")
    db_init_delay_sec: float = Field(default=2.0, ge=0, description="Pause between schema creation attempts")

    # Catalog listing
    default_page_size: int = Field(default=20, ge=1, description="Rows per page when the client sends none")
    max_page_size: int = Field(default=100, ge=1, description="Largest page size the API accepts")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="logging.basicConfig format",
    )

    # CORS for the admin and mobile front ends
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8081"],
        description="Origins allowed to call the API",
    )
    cors_allow_credentials: bool = Field(default=True, description="Allow cookies and auth headers")
    cors_allow_methods: list[str] = Field(default=["*"], description="Allowed HTTP methods")
    cors_allow_headers: list[str] = Field(default=["*"], description="Allowed request headers")

    # OpenAPI
    api_prefix: str = Field(default="", description="Prefix mounted in front of every router")
    api_title: str = Field(default="Pawnder Attribute API", description="OpenAPI title")
    api_description: str = Field(
        default="Attribute catalog, matching preferences and filter suggestions",
        description="OpenAPI description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.strip().lower())
        return v

    @field_validator("database_url")
    @classmethod
    def use_psycopg2_driver(cls, v: str) -> str:
        """Heroku-style ``postgres://`` URLs are not understood by SQLAlchemy 2"""
        if v.startswith("postgres://"):
            return "postgresql+psycopg2://" + v[len("postgres://"):]
        return v

    @model_validator(mode="after")
    def check_page_sizes(self):
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING


settings = Settings()
