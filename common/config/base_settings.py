"""
Environment-driven settings shared by CookBook services.

Values come from environment variables or a local `.env` file. Application
settings subclass BaseAppSettings and add their own fields.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Database, server and CORS settings."""

    # ==========================================================================
    # Database
    # ==========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "cookbook"

    # ==========================================================================
    # Server
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # Comma-separated origins or "*"
    CORS_ORIGINS: str = "http://localhost:5173"
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=True,
    )

    def get_cors_origins(self) -> list:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Check settings that have no usable default.

        Raises:
            ValueError: Listing every problem found
        """
        errors = []

        if not self.MONGODB_URI:
            errors.append("MONGODB_URI is required")

        if not self.MONGODB_DATABASE:
            errors.append("MONGODB_DATABASE is required")

        # Browsers reject a wildcard origin on credentialed requests
        if self.CORS_ALLOW_CREDENTIALS and self.CORS_ORIGINS == "*":
            errors.append("CORS_ORIGINS must list explicit origins when CORS_ALLOW_CREDENTIALS is set")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
