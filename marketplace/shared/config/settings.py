# 📄 File: marketplace/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads settings from environment variables (or a .env file)
# and hands them to the rest of the marketplace in one organized place.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for database, logging, security and business defaults.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - marketplace.shared.infrastructure.database.connection
# - marketplace.shared.utils.logging
# - marketplace.shared.core.security
# - marketplace.modules.finance.domain.services.commission_service
# - migrations/env.py

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Settings are read from the process environment with a fallback
    to a local .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="marketplace", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")

    # =========================================================================
    # LOGGING
    # =========================================================================

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format: json or text")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: Optional[str] = Field(None, description="Async database connection URL")
    DB_HOST: str = Field(default="localhost", description="Database host")
    DB_PORT: int = Field(default=5432, description="Database port")
    DB_NAME: str = Field(default="marketplace", description="Database name")
    DB_USER: str = Field(default="postgres", description="Database user")
    DB_PASSWORD: str = Field(default="", description="Database password")
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")

    # Connection Pool Settings
    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    BCRYPT_ROUNDS: int = Field(default=12, description="BCrypt hash rounds")

    # =========================================================================
    # BUSINESS DEFAULTS
    # =========================================================================

    DEFAULT_CURRENCY: str = Field(default="INR", description="Currency for new monetary records")
    DEFAULT_COMMISSION_PERCENTAGE: float = Field(
        default=10.0,
        description="Commission applied when no subscription override or rule matches"
    )
    OTP_EXPIRY_MINUTES: int = Field(default=10, description="OTP validity window")
    OTP_MAX_ATTEMPTS: int = Field(default=5, description="OTP verification attempts")
    SHOW_SEAT_LOCK_TTL_SECONDS: int = Field(
        default=300,
        description="Seat hold duration recorded on new cinema shows"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt accepts cost factors between 4 and 31."""
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("DEFAULT_COMMISSION_PERCENTAGE")
    @classmethod
    def validate_commission(cls, v: float) -> float:
        if not 0 <= v <= 100:
            raise ValueError("DEFAULT_COMMISSION_PERCENTAGE must be between 0 and 100")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Get the database URL, preferring explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
