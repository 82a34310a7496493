"""Object storage models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict


class ObjectBody(Protocol):
    def read(self) -> bytes: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class StoredObject:
    """An object fetched from a bucket, with its content still unread."""

    key: str
    body: ObjectBody
    version: str | None = None


class ObjectFetchError(BaseModel):
    """Object could not be fetched, either absent or inaccessible."""

    model_config = ConfigDict(extra="forbid")

    bucket: str
    key: str
    code: str | None = None
    message: str
