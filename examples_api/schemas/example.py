from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from examples_api.domain.example import (
    CreateExampleCommand,
    Example as ExampleData,
    UpdateExampleCommand,
)
from examples_api.domain.model import VersionedEntity


class Example(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email: str
    country: str
    salary: Decimal | None = None


class ExampleEnvelope(BaseModel):
    """Versioned example as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    version: int
    created_at: datetime
    updated_at: datetime
    data: Example

    @classmethod
    def from_entity(cls, entity: VersionedEntity[ExampleData]) -> "ExampleEnvelope":
        return cls(
            id=entity.id,
            version=entity.version,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            data=Example.model_validate(entity.data),
        )


class ExampleCreate(BaseModel):
    email: EmailStr
    country: str = Field(..., min_length=1, max_length=64)
    salary: Decimal | None = Field(None, ge=0, max_digits=14, decimal_places=2)

    def to_command(self) -> CreateExampleCommand:
        return CreateExampleCommand(email=self.email, country=self.country, salary=self.salary)


class ExampleUpdate(BaseModel):
    version: int = Field(..., ge=0, description="Version the client last read")
    country: str = Field(..., min_length=1, max_length=64)
    salary: Decimal | None = Field(None, ge=0, max_digits=14, decimal_places=2)

    def to_command(self, example_id: UUID) -> UpdateExampleCommand:
        return UpdateExampleCommand(
            id=example_id,
            version=self.version,
            country=self.country,
            salary=self.salary,
        )
