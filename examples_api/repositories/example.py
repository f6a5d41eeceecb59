import logging
from dataclasses import replace
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError, StaleDataError

from examples_api.db.models.example import Example as ExampleModel
from examples_api.domain.example import EXAMPLE_MODEL, Example
from examples_api.domain.model import VersionedEntity
from examples_api.errors import ModelDuplicated, ModelNotFound, OutdatedVersion, Result

logger = logging.getLogger(__name__)


def _utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_entity(row: ExampleModel) -> VersionedEntity[Example]:
    return VersionedEntity(
        id=row.id,
        version=row.version,
        created_at=_utc(row.created_at),
        updated_at=_utc(row.updated_at),
        data=Example(email=row.email, country=row.country, salary=row.salary),
    )


def to_row(example: VersionedEntity[Example]) -> ExampleModel:
    return ExampleModel(
        id=example.id,
        version=example.version,
        created_at=example.created_at,
        updated_at=example.updated_at,
        email=example.data.email,
        country=example.data.country,
        salary=example.data.salary,
    )


class ExampleStorageAdapter:
    """SQLAlchemy implementation of ``ExampleStoragePort``. Pure data access."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, example: VersionedEntity[Example]) -> Result[VersionedEntity[Example]]:
        """Insert the example as given; its version stays as built by the caller."""
        self.db.add(to_row(example))
        try:
            self.db.commit()
        except (IntegrityError, FlushError) as e:
            self.db.rollback()
            logger.warning("Rejected duplicated example %s: %s", example.id, e)
            return ModelDuplicated(
                model=EXAMPLE_MODEL,
                params={"id": example.id, "email": example.data.email},
            )
        return example

    def exists_by_email(self, email: str) -> bool:
        return (
            self.db.query(ExampleModel.id).filter(ExampleModel.email == email).first()
            is not None
        )

    def get_by_id(self, example_id: UUID) -> VersionedEntity[Example] | None:
        row = self.db.query(ExampleModel).filter(ExampleModel.id == example_id).first()
        if row is None:
            return None
        return to_entity(row)

    def update(self, example: VersionedEntity[Example]) -> Result[VersionedEntity[Example]]:
        """
        Write data and updated_at, bumping the version by one.

        ``example.version`` must match the stored version, checked here and
        again by the UPDATE itself so a concurrent writer between the two
        is caught as well.
        """
        params = {"id": example.id, "version": example.version}
        row = self.db.query(ExampleModel).filter(ExampleModel.id == example.id).first()
        if row is None:
            return ModelNotFound(model=EXAMPLE_MODEL, params={"id": example.id})
        if row.version != example.version:
            return OutdatedVersion(model=EXAMPLE_MODEL, params=params)

        row.country = example.data.country
        row.salary = example.data.salary
        row.updated_at = example.updated_at
        row.version = example.version + 1
        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            logger.warning("Outdated write on example %s at version %s", example.id, example.version)
            return OutdatedVersion(model=EXAMPLE_MODEL, params=params)
        return replace(example, version=example.version + 1)
