"""envbucket object storage module."""

from .models import ObjectBody, ObjectFetchError, StoredObject
from .protocol import ObjectStore
from .s3 import S3ObjectStore, create_s3_client

__all__ = [
    "ObjectBody",
    "ObjectFetchError",
    "ObjectStore",
    "S3ObjectStore",
    "StoredObject",
    "create_s3_client",
]
