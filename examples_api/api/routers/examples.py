from uuid import UUID

from fastapi import APIRouter, Depends, status

from examples_api.api.deps import (
    get_create_example_use_case,
    get_get_example_use_case,
    get_update_example_use_case,
)
from examples_api.api.exception_handlers import failure_response
from examples_api.errors import Failure
from examples_api.schemas.error import ErrorResponse
from examples_api.schemas.example import ExampleCreate, ExampleEnvelope, ExampleUpdate
from examples_api.services.example import (
    CreateExampleUseCase,
    GetExampleUseCase,
    UpdateExampleUseCase,
)

router = APIRouter(prefix="/examples", tags=["examples"])


@router.post(
    "",
    response_model=ExampleEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def create_example(
    example_data: ExampleCreate,
    use_case: CreateExampleUseCase = Depends(get_create_example_use_case),
):
    """
    Create a new example.

    Every business rule is checked and all violations are returned together.
    """
    result = use_case.execute(example_data.to_command())
    if isinstance(result, Failure):
        return failure_response(result)
    return ExampleEnvelope.from_entity(result)


@router.get(
    "/{example_id}",
    response_model=ExampleEnvelope,
    responses={404: {"model": ErrorResponse}},
)
def get_example(
    example_id: UUID,
    use_case: GetExampleUseCase = Depends(get_get_example_use_case),
):
    result = use_case.execute(example_id)
    if isinstance(result, Failure):
        return failure_response(result)
    return ExampleEnvelope.from_entity(result)


@router.put(
    "/{example_id}",
    response_model=ExampleEnvelope,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def update_example(
    example_id: UUID,
    example_data: ExampleUpdate,
    use_case: UpdateExampleUseCase = Depends(get_update_example_use_case),
):
    """
    Update country and salary of an example.

    The body carries the version the client last read; a stale version is
    answered with 409 OutdatedVersion and nothing is written.
    """
    result = use_case.execute(example_data.to_command(example_id))
    if isinstance(result, Failure):
        return failure_response(result)
    return ExampleEnvelope.from_entity(result)
