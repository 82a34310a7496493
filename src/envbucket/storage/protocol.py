"""Object storage protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import ObjectFetchError, StoredObject


class ObjectStore(Protocol):
    """Protocol for read access to a bucket of objects."""

    def get(self, bucket: str, key: str) -> Result[StoredObject, ObjectFetchError]:
        """Fetch an object; the caller owns and must close the returned body."""
        ...
