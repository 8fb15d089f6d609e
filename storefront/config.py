"""
Configuration Layer
===================

Centralized, type-safe configuration management for all environment variables.

Usage:
    from storefront.config import config

    # Access API keys
    api_key = config.apis.openai_api_key

    # Access database settings
    db_url = config.database.url

    # Check if in production
    if config.is_production:
        ...
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent


def load_environment(dotenv_path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load a .env file into os.environ without overriding variables that are
    already set. Must run before the config singleton below is built.
    """
    return load_dotenv(dotenv_path or BASE_DIR / ".env")


load_environment()


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///db.sqlite3"))
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "db.sqlite3"))
    host: str = field(default_factory=lambda: os.getenv("DB_HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("DB_PORT", "5432")))
    user: str = field(default_factory=lambda: os.getenv("DB_USER", ""))
    password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", ""))

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.url.lower()


@dataclass(frozen=True)
class RedisConfig:
    """Redis cache settings."""
    url: str = field(default_factory=lambda: os.getenv("REDIS_URL", "redis://localhost:6379/0"))


@dataclass(frozen=True)
class APIKeysConfig:
    """External API keys."""

    # OpenAI (image tagging / category suggestion)
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))

    def is_configured(self, service: str) -> bool:
        """Check if a service has its API keys configured."""
        checks = {
            "openai": bool(self.openai_api_key),
        }
        return checks.get(service.lower(), False)

    @property
    def configured_services(self) -> List[str]:
        """Return list of services with valid API keys."""
        return [s for s in ("openai",) if self.is_configured(s)]


@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(","))
    cors_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000"
    ).split(","))
    csrf_trusted_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CSRF_TRUSTED_ORIGINS",
        "http://localhost:3000"
    ).split(","))
    admin_url: str = field(default_factory=lambda: os.getenv("ADMIN_URL", "admin"))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class VisionConfig:
    """Generative-AI vision model settings."""
    model: str = field(default_factory=lambda: os.getenv("VISION_MODEL", "gpt-4o-mini"))
    timeout: int = field(default_factory=lambda: int(os.getenv("VISION_TIMEOUT", "30")))
    max_image_side: int = field(default_factory=lambda: int(os.getenv("VISION_MAX_IMAGE_SIDE", "800")))


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    # Sub-configurations
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    apis: APIKeysConfig = field(default_factory=APIKeysConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    vision: VisionConfig = field(default_factory=VisionConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of warnings/errors.
        Call this on startup to catch misconfigurations early.
        """
        issues = []

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")

        if not self.apis.openai_api_key:
            issues.append("INFO: OpenAI key not configured (AI category suggestion and tagging disabled)")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug: {self.debug}")
        logger.info(f"Configured APIs: {', '.join(self.apis.configured_services) or 'None'}")


# =============================================================================
# Singleton Instance
# =============================================================================

@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get the singleton configuration instance.
    Uses lru_cache to ensure single instance across the application.
    """
    return AppConfig()


# Convenience alias
config = get_config()


# =============================================================================
# Django Settings Helpers
# =============================================================================

def get_database_config() -> dict:
    """
    Get database configuration in Django format.
    Returns dict suitable for DATABASES["default"].
    """
    if config.database.is_sqlite:
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": config.database.name,
        }

    return {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": config.database.name,
        "HOST": config.database.host,
        "PORT": config.database.port,
        "USER": config.database.user,
        "PASSWORD": config.database.password,
    }
