"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Chef en Place", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=5000, ge=1, le=65535, description="Server port")

    # MongoDB settings
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017/chef-en-place",
        description="MongoDB connection URI",
    )
    mongodb_db: str = Field(
        default="chef-en-place",
        description="Database name used when the URI carries none",
    )
    db_connect_attempts: int = Field(
        default=5, ge=1, description="Connection attempts before giving up"
    )
    db_connect_retry_delay_sec: float = Field(
        default=3.0, ge=0, description="Initial backoff delay, doubled per attempt"
    )
    db_server_selection_timeout_ms: int = Field(
        default=60000, ge=0, description="pymongo server selection timeout"
    )
    db_max_pool_size: int = Field(default=10, ge=1, description="Max pool size")
    db_min_pool_size: int = Field(default=1, ge=0, description="Min pool size")

    # Connection-readiness gate
    db_gate_timeout_sec: float = Field(
        default=45.0, gt=0, description="Deadline for the connection gate"
    )
    db_retry_after_sec: int = Field(
        default=10, ge=0, description="Retry hint sent with 503 responses"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:3001",
            "https://chef-frontend-psi.vercel.app",
            "https://chef-frontend-eta.vercel.app",
            "https://chefenplace-psi.vercel.app",
            "https://chef-frontend.vercel.app",
            "https://chef-en-place.vercel.app",
        ],
        description="Allowed CORS origins",
    )
    cors_origin_regex: Optional[str] = Field(
        default=r"https://[a-z0-9-]*(chef-frontend|chef-app-backend|chef-backend|chef-en-place|chefenplace)[a-z0-9-]*\.vercel\.app",
        description="Regex for preview deployments",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        description="Allowed HTTP methods",
    )
    cors_allow_headers: list[str] = Field(
        default=[
            "Content-Type",
            "Authorization",
            "X-Requested-With",
            "stripe-signature",
            "Accept",
            "Origin",
        ],
        description="Allowed HTTP headers",
    )

    # API settings
    api_prefix: str = Field(default="/api", description="API route prefix")
    api_title: str = Field(
        default="Chef en Place API", description="API documentation title"
    )
    api_description: str = Field(
        default="Restaurant management backend support services",
        description="API documentation description",
    )

    # Scripts
    api_base_url: str = Field(
        default="https://chef-app-backend.vercel.app",
        description="Deployed instance targeted by smoke scripts",
    )
    frontend_url: str = Field(
        default="https://chef-frontend-psi.vercel.app",
        description="Frontend used to build checkout redirect URLs",
    )
    http_timeout_sec: float = Field(default=30.0, gt=0, description="HTTP timeout")
    head_chef_id: Optional[str] = Field(
        default=None, description="Head chef targeted by create_restaurant"
    )
    backup_dir: str = Field(default="backups", description="User backup directory")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
