from fastapi import Depends
from sqlalchemy.orm import Session

from examples_api.core.config import settings
from examples_api.core.providers import (
    IdProvider,
    SystemTimeProvider,
    TimeProvider,
    UUIDProvider,
)
from examples_api.db import SessionLocal
from examples_api.domain.ports import ExampleConfigPort, ExampleStoragePort
from examples_api.domain.rules import create_example_validator, update_example_validator
from examples_api.repositories.config import SettingsConfigAdapter
from examples_api.repositories.example import ExampleStorageAdapter
from examples_api.services.example import (
    CreateExampleUseCase,
    GetExampleUseCase,
    UpdateExampleUseCase,
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_id_provider() -> IdProvider:
    return UUIDProvider()


def get_time_provider() -> TimeProvider:
    return SystemTimeProvider()


def get_example_storage(db: Session = Depends(get_db)) -> ExampleStoragePort:
    return ExampleStorageAdapter(db)


def get_example_config() -> ExampleConfigPort:
    return SettingsConfigAdapter(settings)


def get_create_example_use_case(
    storage: ExampleStoragePort = Depends(get_example_storage),
    config: ExampleConfigPort = Depends(get_example_config),
    id_provider: IdProvider = Depends(get_id_provider),
    time_provider: TimeProvider = Depends(get_time_provider),
) -> CreateExampleUseCase:
    return CreateExampleUseCase(
        validator=create_example_validator(storage, config),
        storage=storage,
        id_provider=id_provider,
        time_provider=time_provider,
    )


def get_get_example_use_case(
    storage: ExampleStoragePort = Depends(get_example_storage),
) -> GetExampleUseCase:
    return GetExampleUseCase(storage)


def get_update_example_use_case(
    storage: ExampleStoragePort = Depends(get_example_storage),
    config: ExampleConfigPort = Depends(get_example_config),
    time_provider: TimeProvider = Depends(get_time_provider),
) -> UpdateExampleUseCase:
    return UpdateExampleUseCase(
        validator=update_example_validator(config),
        storage=storage,
        time_provider=time_provider,
    )
