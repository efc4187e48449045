"""Application settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config.cors_config import CORSConfiguration, CORSConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Auth Demo API"
    app_version: str = "0.1.0"

    # Environment-specific settings
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = "/api"

    # Simulated backend latency for login/sign-up submissions
    mock_network_delay_seconds: float = 1.0

    # CORS
    cors_allow_origins: str = "http://localhost:3000,http://localhost:5173"
    cors_allow_credentials: bool = False
    cors_max_age: int = 600

    # Rate limiting (slowapi limit string)
    rate_limit_default: str = "60/minute"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level against the logging module's level names."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("mock_network_delay_seconds")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("mock_network_delay_seconds cannot be negative")
        return v

    def get_cors_configuration(self) -> CORSConfiguration:
        """Get CORS configuration based on environment settings.

        Raises:
            CORSConfigurationError: If CORS configuration is invalid or insecure.

        """
        try:
            return CORSConfiguration(
                allow_origins=self.cors_allow_origins,
                allow_credentials=self.cors_allow_credentials,
                max_age=self.cors_max_age,
                environment=self.environment,
            )
        except CORSConfigurationError as exc:
            logger.error(f"Failed to create CORS configuration: {exc}")
            raise


settings = Settings()
