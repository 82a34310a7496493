"""Environment repository protocol."""

from __future__ import annotations

from typing import Protocol

from .models import Environment


class EnvironmentRepository(Protocol):
    """Protocol for backends resolving an application/profile/label to an Environment."""

    @property
    def order(self) -> int:
        """Precedence among repositories; lower values are consulted first."""
        ...

    def find_one(self, application: str | None, profile: str | None, label: str | None) -> Environment:
        """Resolve an environment.

        Raises:
            NoSuchRepositoryError: nothing is stored for the requested environment.
            EnvironmentUnloadableError: stored content cannot be read or parsed.
        """
        ...
