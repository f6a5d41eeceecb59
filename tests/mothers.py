"""Builders for domain objects with sensible defaults for tests."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from examples_api.domain.example import CreateExampleCommand, Example, UpdateExampleCommand
from examples_api.domain.model import VersionedEntity

CREATED_AT = datetime(2026, 1, 1, tzinfo=timezone.utc)


def example_of(
    email: str = "jane@example.com",
    country: str = "USA",
    salary: Decimal | None = Decimal("250.00"),
) -> Example:
    return Example(email=email, country=country, salary=salary)


def versioned_example_of(
    data: Example | None = None,
    example_id: UUID | None = None,
    version: int = 0,
    created_at: datetime = CREATED_AT,
    updated_at: datetime | None = None,
) -> VersionedEntity[Example]:
    return VersionedEntity(
        id=example_id or uuid4(),
        version=version,
        created_at=created_at,
        updated_at=updated_at or created_at,
        data=data or example_of(),
    )


def create_command_of(
    email: str = "jane@example.com",
    country: str = "USA",
    salary: Decimal | None = Decimal("250.00"),
) -> CreateExampleCommand:
    return CreateExampleCommand(email=email, country=country, salary=salary)


def update_command_of(
    example_id: UUID,
    version: int = 0,
    country: str = "CA",
    salary: Decimal | None = Decimal("280.00"),
) -> UpdateExampleCommand:
    return UpdateExampleCommand(id=example_id, version=version, country=country, salary=salary)
