"""Public environment repository API for envbucket."""

from __future__ import annotations

from .config import S3RepositorySettings, ServerConfig
from .models import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    ConfigFormat,
    ConfigParseError,
    Environment,
    EnvironmentLoadError,
    EnvironmentLookupError,
    EnvironmentNotFoundError,
    EnvironmentRepositoryError,
    EnvironmentUnloadableError,
    NoSuchRepositoryError,
    PropertySource,
)
from .protocol import EnvironmentRepository
from .s3 import S3EnvironmentRepository, object_key_prefix

__all__ = [
    "HIGHEST_PRECEDENCE",
    "LOWEST_PRECEDENCE",
    "ConfigFormat",
    "ConfigParseError",
    "Environment",
    "EnvironmentLoadError",
    "EnvironmentLookupError",
    "EnvironmentNotFoundError",
    "EnvironmentRepository",
    "EnvironmentRepositoryError",
    "EnvironmentUnloadableError",
    "NoSuchRepositoryError",
    "PropertySource",
    "S3EnvironmentRepository",
    "S3RepositorySettings",
    "ServerConfig",
    "object_key_prefix",
]
