"""Server and repository configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from envbucket.common import NonEmptyString

from .models import LOWEST_PRECEDENCE


class ServerConfig(BaseModel):
    """Defaults applied to incoming lookups and overrides applied to their results."""

    model_config = ConfigDict(extra="forbid")

    default_application_name: NonEmptyString = "application"
    default_profile: NonEmptyString = "default"
    default_label: str | None = None
    overrides: dict[str, str] = Field(default_factory=dict)


class S3RepositorySettings(BaseModel):
    """Connection settings for an S3-backed environment repository."""

    model_config = ConfigDict(extra="forbid")

    bucket: NonEmptyString
    region: str | None = None
    endpoint_url: str | None = None
    order: int = LOWEST_PRECEDENCE
