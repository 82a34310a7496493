"""Pydantic models for environments, property sources and lookup errors."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

LOWEST_PRECEDENCE = 2**31 - 1
HIGHEST_PRECEDENCE = -(2**31)


class ConfigFormat(str, Enum):
    """Supported configuration file formats, keyed by object extension."""

    PROPERTIES = "properties"
    YAML = "yml"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @classmethod
    def lookup_order(cls) -> tuple[ConfigFormat, ...]:
        return (cls.PROPERTIES, cls.YAML)


class PropertySource(BaseModel):
    """A named flat key-value mapping contributed to an environment."""

    model_config = ConfigDict(extra="forbid")

    name: str
    source: dict[str, str] = Field(default_factory=dict)


class Environment(BaseModel):
    """Resolved configuration for one application, profile and label."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    profiles: list[str]
    label: str | None = None
    version: str | None = None
    state: str | None = None
    property_sources: list[PropertySource] = Field(default_factory=list, alias="propertySources")

    def add(self, property_source: PropertySource) -> None:
        self.property_sources.append(property_source)

    def to_payload(self) -> dict[str, object]:
        """Dump using the wire names the config frontend serves."""
        return self.model_dump(mode="json", by_alias=True)


class ConfigParseError(BaseModel):
    """Content could not be decoded into a flat mapping."""

    model_config = ConfigDict(extra="forbid")

    format: ConfigFormat
    line: int | None = None
    column: int | None = None
    message: str


class EnvironmentNotFoundError(BaseModel):
    """No configuration object exists for the requested key."""

    model_config = ConfigDict(extra="forbid")

    bucket: str
    key_pattern: str
    message: str


class EnvironmentLoadError(BaseModel):
    """Configuration object exists but its content cannot be loaded."""

    model_config = ConfigDict(extra="forbid")

    bucket: str
    key: str
    message: str


type EnvironmentLookupError = EnvironmentNotFoundError | EnvironmentLoadError


class EnvironmentRepositoryError(Exception):
    """Base exception raised by environment repositories."""

    def __init__(self, error: EnvironmentLookupError) -> None:
        super().__init__(error.message)
        self.error = error


class NoSuchRepositoryError(EnvironmentRepositoryError):
    """Raised when no configuration object matches the requested environment."""

    error: EnvironmentNotFoundError


class EnvironmentUnloadableError(EnvironmentRepositoryError):
    """Raised when a configuration object is found but cannot be read or parsed."""

    error: EnvironmentLoadError
