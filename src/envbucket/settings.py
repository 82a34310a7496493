from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from envbucket.common import AppInfo, LoggingConfig, create_logger
from envbucket.environment import S3EnvironmentRepository, S3RepositorySettings, ServerConfig

logger = create_logger("settings")


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    server: ServerConfig = ServerConfig()
    s3: S3RepositorySettings | None = None
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="ENVBUCKET_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def build_repository(settings: Settings, *, client: Any | None = None) -> S3EnvironmentRepository:
    """Wire an S3 environment repository from settings.

    Raises:
        ValueError: no S3 repository settings are configured.
    """
    if settings.s3 is None:
        raise ValueError("S3 repository settings are missing; set ENVBUCKET_S3__BUCKET.")
    logger.debug("Building S3 environment repository", bucket=settings.s3.bucket, order=settings.s3.order)
    return S3EnvironmentRepository.from_settings(settings.s3, settings.server, client=client)


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "Settings",
    "build_repository",
    "get_settings",
]
