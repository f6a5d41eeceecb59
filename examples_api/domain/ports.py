"""Contracts the example use cases depend on.

Adapters live in ``examples_api.repositories`` and are wired in
``examples_api.api.deps``.
"""

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from examples_api.domain.example import Example
from examples_api.domain.model import Range, VersionedEntity
from examples_api.errors import Result


class ExampleStoragePort(Protocol):
    def create(self, example: VersionedEntity[Example]) -> Result[VersionedEntity[Example]]:
        """Insert a new example, or return ``ModelDuplicated`` on a key clash."""
        ...

    def exists_by_email(self, email: str) -> bool: ...

    def get_by_id(self, example_id: UUID) -> VersionedEntity[Example] | None: ...

    def update(self, example: VersionedEntity[Example]) -> Result[VersionedEntity[Example]]:
        """Write ``example`` if the stored version still equals ``example.version``.

        Returns the stored entity with its version bumped by one, or
        ``OutdatedVersion`` / ``ModelNotFound``.
        """
        ...


class ExampleConfigPort(Protocol):
    def allowed_countries(self) -> set[str]: ...

    def salary_range(self) -> Range[Decimal]: ...
