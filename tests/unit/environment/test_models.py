from __future__ import annotations

import pytest

from envbucket.environment.models import (
    ConfigFormat,
    Environment,
    EnvironmentLoadError,
    EnvironmentNotFoundError,
    EnvironmentRepositoryError,
    NoSuchRepositoryError,
    PropertySource,
)


def test_config_format_lookup_order_tries_properties_first() -> None:
    assert [fmt.extension for fmt in ConfigFormat.lookup_order()] == [".properties", ".yml"]


def test_environment_payload_uses_wire_names() -> None:
    environment = Environment(name="app", profiles=["dev"], label="main", version="v1")
    environment.add(PropertySource(name="app", source={"a": "1"}))

    assert environment.to_payload() == {
        "name": "app",
        "profiles": ["dev"],
        "label": "main",
        "version": "v1",
        "state": None,
        "propertySources": [{"name": "app", "source": {"a": "1"}}],
    }


def test_environment_accepts_wire_names_on_input() -> None:
    environment = Environment.model_validate(
        {
            "name": "app",
            "profiles": ["dev"],
            "propertySources": [{"name": "app", "source": {"a": "1"}}],
        }
    )

    assert environment.property_sources == [PropertySource(name="app", source={"a": "1"})]


def test_repository_errors_carry_structured_error() -> None:
    error = EnvironmentNotFoundError(bucket="b", key_pattern="a-b(.properties|.yml)", message="No such repository")

    with pytest.raises(EnvironmentRepositoryError, match="No such repository") as exc_info:
        raise NoSuchRepositoryError(error)

    assert exc_info.value.error is error


def test_error_models_forbid_unknown_fields() -> None:
    with pytest.raises(ValueError):
        EnvironmentLoadError.model_validate({"bucket": "b", "key": "k", "message": "m", "extra": 1})
