"""Decoders turning configuration object content into flat string mappings."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import closing
from datetime import date
from typing import IO

import javaproperties
import yaml
from result import Err, Ok, Result

from envbucket.common import create_logger
from envbucket.storage import ObjectBody

from .models import ConfigFormat, ConfigParseError

logger = create_logger("environment.parsers")

type Stream = ObjectBody | IO[bytes] | IO[str]
type ParseResult = Result[dict[str, str], ConfigParseError]


def parse_config(fmt: ConfigFormat, stream: Stream) -> ParseResult:
    """Parse ``stream`` with the decoder for ``fmt``; the stream is always closed."""
    with closing(stream):
        match fmt:
            case ConfigFormat.PROPERTIES:
                return parse_properties(stream)
            case ConfigFormat.YAML:
                return parse_yaml(stream)


def parse_properties(stream: Stream) -> ParseResult:
    """Decode Java ``.properties`` syntax; byte streams are read as ISO-8859-1."""
    try:
        content = stream.read()
        if isinstance(content, bytes):
            content = content.decode("iso-8859-1")
        properties = javaproperties.loads(content)
    except (OSError, ValueError) as exc:
        logger.debug("Failed to load properties content", error=str(exc))
        return Err(ConfigParseError(format=ConfigFormat.PROPERTIES, message=f"Cannot load environment: {exc}"))

    return Ok(dict(properties))


def parse_yaml(stream: Stream) -> ParseResult:
    """Load every YAML document in ``stream`` into one flattened mapping.

    Later documents overwrite keys set by earlier ones. Empty documents are
    skipped and a bare scalar document is stored under the empty key.
    """
    properties: dict[str, str] = {}
    try:
        for document in yaml.safe_load_all(stream.read()):
            if document is None:
                continue
            flatten_into(properties, "", document)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        logger.debug("Failed to parse YAML content", error=str(exc))
        return Err(
            ConfigParseError(
                format=ConfigFormat.YAML,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=f"Cannot load environment: {exc}",
            )
        )
    except (OSError, ValueError) as exc:
        logger.debug("Failed to read YAML content", error=str(exc))
        return Err(ConfigParseError(format=ConfigFormat.YAML, message=f"Cannot load environment: {exc}"))

    return Ok(properties)


def flatten_into(
    properties: dict[str, str],
    key: str,
    value: object,
    _parents: frozenset[int] = frozenset(),
) -> None:
    """Flatten ``value`` under ``key`` using dotted and indexed property paths.

    Mappings contribute ``key.child`` (``child`` at the root), sequences
    contribute ``key[index]`` and scalars are stored as their string form.

    Raises:
        ValueError: a container contains itself, e.g. through a YAML alias.
    """
    if isinstance(value, Mapping | list):
        if id(value) in _parents:
            raise ValueError(f"recursive YAML alias at '{key}'")
        _parents = _parents | {id(value)}

    if isinstance(value, Mapping):
        for child_key, child_value in value.items():
            child = render_scalar(child_key)
            flatten_into(properties, f"{key}.{child}" if key else child, child_value, _parents)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            flatten_into(properties, f"{key}[{index}]", item, _parents)
    else:
        properties[key] = render_scalar(value)


def render_scalar(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
