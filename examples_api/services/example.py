"""Example use cases.

Each use case sequences validation, entity construction and a single port
call. Failures are returned, never raised, and are passed on unchanged:
validation errors are aggregated, not-found and conflicts are forwarded
as-is, and nothing is retried.
"""

import logging
from dataclasses import replace
from uuid import UUID

from examples_api.core.providers import (
    IdProvider,
    SystemTimeProvider,
    TimeProvider,
    UUIDProvider,
)
from examples_api.domain.example import (
    EXAMPLE_MODEL,
    CreateExampleCommand,
    Example,
    UpdateExampleCommand,
)
from examples_api.domain.model import VersionedEntity
from examples_api.domain.ports import ExampleStoragePort
from examples_api.domain.validation import CommandValidator
from examples_api.errors import Failure, ModelNotFound, Result

logger = logging.getLogger(__name__)


class CreateExampleUseCase:
    def __init__(
        self,
        validator: CommandValidator[CreateExampleCommand],
        storage: ExampleStoragePort,
        id_provider: IdProvider | None = None,
        time_provider: TimeProvider | None = None,
    ):
        self.validator = validator
        self.storage = storage
        self.id_provider = id_provider or UUIDProvider()
        self.time_provider = time_provider or SystemTimeProvider()

    def execute(self, command: CreateExampleCommand) -> Result[VersionedEntity[Example]]:
        """
        Create an example with version 0.

        - Runs every rule and returns all violations together
        - Writes nothing unless validation passed

        Returns:
            The persisted example, ``ValidationFailure`` or ``ModelDuplicated``.
        """
        failure = self.validator.validate(command)
        if failure is not None:
            return failure

        now = self.time_provider.now()
        example = VersionedEntity(
            id=self.id_provider.generate(),
            version=0,
            created_at=now,
            updated_at=now,
            data=Example(
                email=command.email,
                country=command.country,
                salary=command.salary,
            ),
        )

        result = self.storage.create(example)
        if not isinstance(result, Failure):
            logger.info("Created example %s", example.id)
        return result


class GetExampleUseCase:
    def __init__(self, storage: ExampleStoragePort):
        self.storage = storage

    def execute(self, example_id: UUID) -> Result[VersionedEntity[Example]]:
        example = self.storage.get_by_id(example_id)
        if example is None:
            return ModelNotFound(model=EXAMPLE_MODEL, params={"id": example_id})
        return example


class UpdateExampleUseCase:
    def __init__(
        self,
        validator: CommandValidator[UpdateExampleCommand],
        storage: ExampleStoragePort,
        time_provider: TimeProvider | None = None,
    ):
        self.validator = validator
        self.storage = storage
        self.time_provider = time_provider or SystemTimeProvider()

    def execute(self, command: UpdateExampleCommand) -> Result[VersionedEntity[Example]]:
        """
        Replace country and salary of an existing example.

        ``command.version`` is the version the caller last read. The storage
        adapter refuses the write with ``OutdatedVersion`` when someone else
        saved in between; the caller decides whether to reload and retry.
        """
        failure = self.validator.validate(command)
        if failure is not None:
            return failure

        current = self.storage.get_by_id(command.id)
        if current is None:
            return ModelNotFound(model=EXAMPLE_MODEL, params={"id": command.id})

        updated = replace(
            current,
            version=command.version,
            updated_at=self.time_provider.now(),
            data=replace(current.data, country=command.country, salary=command.salary),
        )
        return self.storage.update(updated)
