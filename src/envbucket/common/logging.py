"""Logging utilities for envbucket using Loguru.

The package is a library first: its logging is disabled on import and must be
switched on either by the embedding service (configure_logging) or ad hoc
(enable_library_logging).
"""

import sys
from functools import lru_cache
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from envbucket.constants import APP_NAME

from .models import AppInfo

type Logger = "loguru.Logger"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    format: Literal["json", "text"] | None = Field(default=None)


def configure_logging(app_info: AppInfo, config: LoggingConfig) -> list[int]:
    """Route envbucket logs to the standard streams.

    Text output is colorized for the dev environment; every other environment
    gets serialized JSON on stdout plus a JSON error stream on stderr. An
    explicit ``config.format`` wins over the environment default.
    """
    logger.remove()
    if not config.enabled:
        logger.disable(APP_NAME)
        return []

    logger.enable(APP_NAME)
    logger.configure(extra={"scope": "global", "env": app_info.environment})

    output_format = config.format or ("text" if app_info.environment == "dev" else "json")
    if output_format == "text":
        handler_ids = [logger.add(sys.stderr, level=config.log_level, format=get_dev_logs_format, colorize=True)]
    else:
        handler_ids = [
            logger.add(sys.stdout, level=config.log_level, serialize=True, format="{message}"),
            logger.add(sys.stderr, level="ERROR", serialize=True, format="{message}", diagnose=False),
        ]

    logger.debug(
        f"Logging initialized: {app_info.project_name} v{app_info.version} ({app_info.environment})",
        level=config.log_level,
        format=output_format,
    )
    return handler_ids


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> Logger:
    return logger.bind(scope=scope)


@lru_cache
def get_color_from_name(name: str | None) -> str:
    """
    Map a name to a predefined color in a deterministic way.
    """
    colors = [
        "blue",
        "magenta",
        "yellow",
        "white",
        "light-blue",
        "light-green",
        "light-magenta",
        "light-yellow",
    ]

    if not name:
        return colors[0]

    name_hash = sum(ord(c) for c in name)
    return colors[name_hash % len(colors)]


def get_dev_logs_format(record: "loguru.Record") -> str:
    scope = record["extra"].get("scope", None)
    module_color = f"<{get_color_from_name(scope)}>"

    extra_fields = {k: v for k, v in record["extra"].items() if k not in ["scope", "env"]}
    extra_str = ""
    if extra_fields:
        extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())

    # Literal braces in extra values would be read as format fields by loguru.
    extra_str = extra_str.replace("{", "{{").replace("}", "}}").replace("<", r"\<")

    return (
        f"{module_color}[{{extra[scope]}}]</> | "
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}:{function}:{line}</cyan> - "
        "<level>{message}</level>"
        f"{extra_str}\n{{exception}}"
    )


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
