"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        SETTINGS_DOCUMENT_ID: str = "production"

    settings = Settings()
    print(settings.FIREBASE_PROJECT_ID)
"""

import json
from typing import Any, Dict, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Firebase Settings
    # ==========================================================================
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None
    # Whole service-account JSON inline; convenient on hosted platforms
    FIREBASE_SERVICE_ACCOUNT_JSON: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CHECK_REVOKED: bool = False

    # ==========================================================================
    # Server Settings
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # CORS Settings
    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_cors_origins(self) -> list:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_service_account_info(self) -> Optional[Dict[str, Any]]:
        """
        Parse FIREBASE_SERVICE_ACCOUNT_JSON.

        Raises:
            ValueError: If the variable is set but is not a JSON object
        """
        if not self.FIREBASE_SERVICE_ACCOUNT_JSON:
            return None

        try:
            info = json.loads(self.FIREBASE_SERVICE_ACCOUNT_JSON)
        except json.JSONDecodeError as e:
            raise ValueError(f"FIREBASE_SERVICE_ACCOUNT_JSON is not valid JSON: {e}")

        if not isinstance(info, dict):
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_JSON must be a JSON object")
        return info

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Outside production, application default credentials are an
        acceptable fallback, so nothing is enforced there.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if self.is_production() and not (
            self.FIREBASE_CREDENTIALS_PATH or self.FIREBASE_SERVICE_ACCOUNT_JSON
        ):
            errors.append(
                "FIREBASE_CREDENTIALS_PATH or FIREBASE_SERVICE_ACCOUNT_JSON "
                "is required in production"
            )

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
