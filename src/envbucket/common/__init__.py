"""Common models and types used across envbucket modules."""

from .fields import NonEmptyString
from .logging import (
    LoggingConfig,
    configure_logging,
    create_logger,
    disable_library_logging,
    enable_library_logging,
)
from .models import AppInfo

__all__ = [
    "AppInfo",
    "LoggingConfig",
    "NonEmptyString",
    "configure_logging",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
]
