from dataclasses import replace
from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

from sqlalchemy.orm import Session

from examples_api.db.models.example import Example as ExampleModel
from examples_api.errors import ModelDuplicated, ModelNotFound, OutdatedVersion
from examples_api.repositories.example import ExampleStorageAdapter
from mothers import example_of, versioned_example_of


# ============================================================================
# CREATE
# ============================================================================


def test_create_stores_example_with_all_data(db: Session):
    storage = ExampleStorageAdapter(db)
    example = versioned_example_of()

    result = storage.create(example)

    assert result == example
    assert storage.get_by_id(example.id) == example


def test_create_stores_example_without_salary(db: Session):
    storage = ExampleStorageAdapter(db)
    example = versioned_example_of(data=example_of(salary=None))

    storage.create(example)

    assert storage.get_by_id(example.id).data.salary is None


def test_create_rejects_duplicated_id(db: Session):
    storage = ExampleStorageAdapter(db)
    example = versioned_example_of()
    storage.create(example)

    result = storage.create(replace(example, data=example_of(email="other@example.com")))

    assert result == ModelDuplicated(
        model="Example", params={"id": example.id, "email": "other@example.com"}
    )
    assert db.query(ExampleModel).count() == 1
    assert storage.get_by_id(example.id) == example


def test_create_rejects_duplicated_email_without_partial_record(db: Session):
    storage = ExampleStorageAdapter(db)
    first = versioned_example_of(data=example_of(email="jane@example.com"))
    second = versioned_example_of(data=example_of(email="jane@example.com"))
    storage.create(first)

    result = storage.create(second)

    assert isinstance(result, ModelDuplicated)
    assert result.params["id"] == second.id
    assert storage.get_by_id(second.id) is None
    assert db.query(ExampleModel).count() == 1


# ============================================================================
# RETRIEVAL
# ============================================================================


def test_get_by_id_returns_none_when_missing(db: Session):
    storage = ExampleStorageAdapter(db)
    storage.create(versioned_example_of())

    assert storage.get_by_id(uuid4()) is None


def test_exists_by_email(db: Session):
    storage = ExampleStorageAdapter(db)
    storage.create(versioned_example_of(data=example_of(email="jane@example.com")))

    assert storage.exists_by_email("jane@example.com") is True
    assert storage.exists_by_email("john@example.com") is False


# ============================================================================
# UPDATE
# ============================================================================


def test_update_increments_version(db: Session):
    storage = ExampleStorageAdapter(db)
    example = versioned_example_of()
    storage.create(example)
    changed = replace(
        example,
        updated_at=example.created_at + timedelta(hours=1),
        data=example_of(country="CA", salary=Decimal("299.99")),
    )

    result = storage.update(changed)

    assert result == replace(changed, version=1)
    assert storage.get_by_id(example.id) == replace(changed, version=1)


def test_update_rejects_outdated_version(db: Session):
    storage = ExampleStorageAdapter(db)
    example = versioned_example_of()
    storage.create(example)
    storage.update(replace(example, data=example_of(country="CA")))

    result = storage.update(replace(example, data=example_of(country="USA")))

    assert result == OutdatedVersion(model="Example", params={"id": example.id, "version": 0})
    stored = storage.get_by_id(example.id)
    assert stored.version == 1
    assert stored.data.country == "CA"


def test_update_missing_example(db: Session):
    storage = ExampleStorageAdapter(db)
    example = versioned_example_of()

    result = storage.update(example)

    assert result == ModelNotFound(model="Example", params={"id": example.id})
