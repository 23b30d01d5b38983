"""Application configuration classes."""

from __future__ import annotations

import os
from urllib.parse import urlparse

SUPPORTED_URL_SCHEMES = {"http", "https"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "star-history-seo"
    # Absolute URL the deployment is reachable under, e.g. https://www.star-history.com.
    INSTANCE_URL = _get_env("INSTANCE_URL", "http://localhost:8080")
    DIST_DIR = _get_env("DIST_DIR", "dist")
    TEMPLATE_PATH: str | None = os.getenv("TEMPLATE_PATH")
    CATALOG_PATH: str | None = os.getenv("CATALOG_PATH")
    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    LOG_JSON_ENABLED = _get_env("LOG_JSON_ENABLED", "false").lower() == "true"
    LOG_FORMAT = _get_env("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")


class DevelopmentConfig(BaseConfig):
    """Configuration for local development."""

    DEBUG = True
    TESTING = False


class ProductionConfig(BaseConfig):
    """Configuration for production deployments."""

    DEBUG = False
    TESTING = False
    INSTANCE_URL = _get_env("INSTANCE_URL", "https://www.star-history.com")
    LOG_JSON_ENABLED = _get_env("LOG_JSON_ENABLED", "true").lower() == "true"


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
}


def get_config(config_name: str | None = None) -> type[BaseConfig]:
    """Return the config class for the requested environment.

    Args:
        config_name: Optional explicit config identifier. If omitted, the
            APP_ENV environment variable is consulted.

    Raises:
        KeyError: If the requested configuration is not defined.
    """

    env_candidate = config_name if config_name is not None else os.getenv("APP_ENV", "development")
    env_name = (env_candidate or "development").lower()
    try:
        config_cls = CONFIG_BY_ENV[env_name]
    except KeyError as exc:
        raise KeyError(f"Unknown APP_ENV '{env_name}'") from exc

    return config_cls


def normalize_instance_url(value: str | None) -> str:
    """Validate an instance URL and strip any trailing slash."""

    candidate = (value or "").strip()
    parsed = urlparse(candidate)
    if parsed.scheme not in SUPPORTED_URL_SCHEMES or not parsed.netloc:
        raise ValueError(
            f"INSTANCE_URL must be an absolute http(s) URL, got '{value}'."
        )
    return candidate.rstrip("/")
