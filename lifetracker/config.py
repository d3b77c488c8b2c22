"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=3001)
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"]
    )

    # Database
    database_url: str | None = Field(default=None)
    database_host: str = Field(default="localhost")
    database_port: int = Field(default=5432)
    database_name: str = Field(default="lifetracker")
    database_user: str = Field(default="postgres")
    database_password: str = Field(default="postgres")
    test_database_url: str = Field(default="sqlite:///./test.db")

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int | None = Field(default=10080, ge=0)  # 7 days, 0 disables expiry

    # Passwords
    bcrypt_work_factor: int = Field(default=12, ge=4, le=31)

    # API
    environment: str = Field(default="development")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == DEFAULT_JWT_SECRET:
                raise ValueError("JWT_SECRET must be changed in production")
            if "localhost" in self.sqlalchemy_database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def sqlalchemy_database_url(self) -> str:
        """Connection string for the current environment.

        The test database wins while testing, then an explicit DATABASE_URL,
        then a PostgreSQL URL assembled from the DATABASE_* components.
        """
        if self.is_testing:
            return self.test_database_url
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    @property
    def token_expires(self) -> bool:
        """Whether issued tokens carry an exp claim."""
        return bool(self.jwt_expiration_minutes)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running under the test suite."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
