"""Environment repository backed by configuration objects in an S3 bucket."""

from __future__ import annotations

from functools import partial
from typing import Any, NamedTuple, overload

from result import Err, Ok, Result

from envbucket.common import create_logger
from envbucket.storage import ObjectStore, S3ObjectStore, StoredObject, create_s3_client

from .config import S3RepositorySettings, ServerConfig
from .models import (
    LOWEST_PRECEDENCE,
    ConfigFormat,
    Environment,
    EnvironmentLoadError,
    EnvironmentLookupError,
    EnvironmentNotFoundError,
    EnvironmentUnloadableError,
    NoSuchRepositoryError,
    PropertySource,
)
from .parsers import parse_config

logger = create_logger("environment.s3")


class _EnvironmentRequest(NamedTuple):
    application: str
    profile: str
    label: str | None


class _ConfigObject(NamedTuple):
    format: ConfigFormat
    stored: StoredObject


class _LoadedConfig(NamedTuple):
    version: str | None
    properties: dict[str, str]


def object_key_prefix(application: str, profile: str, label: str | None = None) -> str:
    """Build ``{application}-{profile}``, suffixed with ``-{label}`` when a label is given."""
    prefix = f"{application}-{profile}"
    if label:
        prefix = f"{prefix}-{label}"
    return prefix


class S3EnvironmentRepository:
    """Resolves environments from ``.properties`` or ``.yml`` objects in a bucket.

    For a request the repository fetches ``<prefix>.properties`` and, when that
    fails for any reason, ``<prefix>.yml``. Absent and inaccessible objects are
    treated alike. The parsed content is merged with the server overrides and
    returned as a single property source named after the application.
    """

    def __init__(
        self,
        store: ObjectStore,
        bucket: str,
        server: ServerConfig,
        *,
        order: int = LOWEST_PRECEDENCE,
    ) -> None:
        self._store = store
        self._bucket = bucket
        self._server = server
        self._order = order

    @classmethod
    def from_settings(
        cls,
        settings: S3RepositorySettings,
        server: ServerConfig,
        *,
        client: Any | None = None,
    ) -> S3EnvironmentRepository:
        if client is None:
            client = create_s3_client(region=settings.region, endpoint_url=settings.endpoint_url)
        return cls(S3ObjectStore(client), settings.bucket, server, order=settings.order)

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def order(self) -> int:
        return self._order

    @order.setter
    def order(self, value: int) -> None:
        self._order = value

    def find_one(self, application: str | None, profile: str | None, label: str | None) -> Environment:
        match self.load(application, profile, label):
            case Ok(environment):
                return environment
            case Err(EnvironmentNotFoundError() as error):
                raise NoSuchRepositoryError(error)
            case Err(error):
                raise EnvironmentUnloadableError(error)

    def load(
        self,
        application: str | None,
        profile: str | None,
        label: str | None,
    ) -> Result[Environment, EnvironmentLookupError]:
        request = self._resolve_request(application, profile, label)
        key_prefix = object_key_prefix(request.application, request.profile, request.label)
        logger.info(
            "Loading environment",
            bucket=self._bucket,
            application=request.application,
            profile=request.profile,
            label=request.label,
        )

        return (
            self._fetch_config_object(key_prefix)
            .and_then(self._read_config_object)
            .map(partial(self._build_environment, request))
            .inspect(partial(self._log_load_success, key_prefix))
            .inspect_err(partial(self._log_load_error, key_prefix))
        )

    def _resolve_request(
        self,
        application: str | None,
        profile: str | None,
        label: str | None,
    ) -> _EnvironmentRequest:
        return _EnvironmentRequest(
            application=_or_default(application, self._server.default_application_name),
            profile=_or_default(profile, self._server.default_profile),
            label=_or_default(label, self._server.default_label),
        )

    def _fetch_config_object(self, key_prefix: str) -> Result[_ConfigObject, EnvironmentLookupError]:
        formats = ConfigFormat.lookup_order()
        for fmt in formats:
            match self._store.get(self._bucket, key_prefix + fmt.extension):
                case Ok(stored):
                    logger.debug("Found configuration object", bucket=self._bucket, key=stored.key)
                    return Ok(_ConfigObject(format=fmt, stored=stored))
                case Err(error):
                    logger.debug(
                        "Configuration object unavailable",
                        bucket=self._bucket,
                        key=error.key,
                        code=error.code,
                        error=error.message,
                    )

        key_pattern = f"{key_prefix}({'|'.join(fmt.extension for fmt in formats)})"
        return Err(
            EnvironmentNotFoundError(
                bucket=self._bucket,
                key_pattern=key_pattern,
                message=f"No such repository: (bucket={self._bucket}, key={key_pattern})",
            )
        )

    def _read_config_object(self, config_object: _ConfigObject) -> Result[_LoadedConfig, EnvironmentLookupError]:
        stored = config_object.stored
        return (
            parse_config(config_object.format, stored.body)
            .map(lambda properties: _LoadedConfig(version=stored.version, properties=properties))
            .map_err(
                lambda err: EnvironmentLoadError(
                    bucket=self._bucket,
                    key=stored.key,
                    message=err.message,
                )
            )
        )

    def _build_environment(self, request: _EnvironmentRequest, loaded: _LoadedConfig) -> Environment:
        source = {**loaded.properties, **self._server.overrides}
        environment = Environment(
            name=request.application,
            profiles=[request.profile],
            label=request.label,
            version=loaded.version,
        )
        environment.add(PropertySource(name=request.application, source=source))
        return environment

    def _log_load_success(self, key_prefix: str, environment: Environment) -> None:
        logger.debug(
            "Environment loaded",
            key_prefix=key_prefix,
            version=environment.version,
            properties=sum(len(ps.source) for ps in environment.property_sources),
        )

    def _log_load_error(self, key_prefix: str, error: EnvironmentLookupError) -> None:
        if isinstance(error, EnvironmentNotFoundError):
            logger.warning("Environment not found", key_prefix=key_prefix, error=error.message)
        else:
            logger.error("Failed to load environment", key_prefix=key_prefix, error=error.message)


@overload
def _or_default(value: str | None, default: str) -> str: ...


@overload
def _or_default(value: str | None, default: str | None) -> str | None: ...


def _or_default(value: str | None, default: str | None) -> str | None:
    if value is None or not value.strip():
        return default
    return value
