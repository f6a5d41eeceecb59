from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from examples_api.errors import ValidationCode

# Label used in failure attributes instead of introspecting the class name.
EXAMPLE_MODEL = "Example"


@dataclass(frozen=True, slots=True)
class Example:
    email: str
    country: str
    salary: Decimal | None = None


@dataclass(frozen=True, slots=True)
class CreateExampleCommand:
    email: str
    country: str
    salary: Decimal | None = None


@dataclass(frozen=True, slots=True)
class UpdateExampleCommand:
    """Replace country and salary of an example read at ``version``."""

    id: UUID
    version: int
    country: str
    salary: Decimal | None = None


class ExampleErrorCode(ValidationCode):
    EMAIL_ALREADY_EXISTS = "The email already exists"
    COUNTRY_NOT_ALLOWED = "The country is not allowed"
    SALARY_OUT_OF_RANGE = "The salary must be between {min} and {max} values"


class ExampleValidationField:
    EMAIL = "email"
    COUNTRY = "country"
    ALLOWED_COUNTRIES = "allowedCountries"
    SALARY = "salary"
    MIN = "min"
    MAX = "max"
