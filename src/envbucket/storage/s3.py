"""S3-backed ObjectStore implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from result import Err, Ok, Result

from envbucket.common import create_logger

from .models import ObjectFetchError, StoredObject

if TYPE_CHECKING:
    from botocore.response import StreamingBody

logger = create_logger("storage.s3")


def create_s3_client(*, region: str | None = None, endpoint_url: str | None = None) -> Any:
    """Create a boto3 S3 client; ``endpoint_url`` targets S3-compatible stores."""
    logger.debug("Creating S3 client", region=region, endpoint_url=endpoint_url)
    return boto3.client("s3", region_name=region, endpoint_url=endpoint_url)


class S3ObjectStore:
    """ObjectStore over a boto3 S3 client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def get(self, bucket: str, key: str) -> Result[StoredObject, ObjectFetchError]:
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            error = e.response.get("Error", {})
            return Err(
                ObjectFetchError(
                    bucket=bucket,
                    key=key,
                    code=error.get("Code"),
                    message=error.get("Message") or str(e),
                )
            )
        except BotoCoreError as e:
            return Err(ObjectFetchError(bucket=bucket, key=key, message=str(e)))

        return Ok(
            StoredObject(
                key=key,
                body=_ResponseBody(response["Body"]),
                version=_object_version(response),
            )
        )


class _ResponseBody:
    """Reports streaming failures from botocore as OSError."""

    def __init__(self, body: StreamingBody) -> None:
        self._body = body

    def read(self) -> bytes:
        try:
            return self._body.read()
        except BotoCoreError as e:
            raise OSError(f"Failed to read object body: {e}") from e

    def close(self) -> None:
        self._body.close()


def _object_version(response: dict[str, Any]) -> str | None:
    version_id = response.get("VersionId")
    if version_id and version_id != "null":
        return version_id
    etag = response.get("ETag")
    return etag.strip('"') if etag else None
