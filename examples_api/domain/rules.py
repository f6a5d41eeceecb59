"""Business rules for examples.

Input shape (empty strings, email format, ...) is checked by the request
schemas before a command exists; rules here only enforce business policy.
"""

from examples_api.domain.example import (
    CreateExampleCommand,
    ExampleErrorCode,
    ExampleValidationField,
    UpdateExampleCommand,
)
from examples_api.domain.ports import ExampleConfigPort, ExampleStoragePort
from examples_api.domain.validation import CommandValidator, ValidationRule
from examples_api.errors import ValidationError


class EmailRule(ValidationRule[CreateExampleCommand]):
    """Email must not belong to another example."""

    order = 0

    def __init__(self, storage: ExampleStoragePort):
        self.storage = storage

    def validate(self, command: CreateExampleCommand) -> list[ValidationError]:
        if not self.storage.exists_by_email(command.email):
            return []
        return [
            ValidationError.of(
                ExampleErrorCode.EMAIL_ALREADY_EXISTS,
                {ExampleValidationField.EMAIL: command.email},
            )
        ]


class CountryRule(ValidationRule[CreateExampleCommand | UpdateExampleCommand]):
    """Country must be one of the configured allowed countries."""

    order = 10

    def __init__(self, config: ExampleConfigPort):
        self.config = config

    def validate(
        self, command: CreateExampleCommand | UpdateExampleCommand
    ) -> list[ValidationError]:
        allowed = self.config.allowed_countries()
        if command.country in allowed:
            return []
        return [
            ValidationError.of(
                ExampleErrorCode.COUNTRY_NOT_ALLOWED,
                {
                    ExampleValidationField.COUNTRY: command.country,
                    ExampleValidationField.ALLOWED_COUNTRIES: sorted(allowed),
                },
            )
        ]


class SalaryRule(ValidationRule[CreateExampleCommand | UpdateExampleCommand]):
    """Salary, when given, must fall inside the configured range."""

    order = 20

    def __init__(self, config: ExampleConfigPort):
        self.config = config

    def is_applicable(self, command: CreateExampleCommand | UpdateExampleCommand) -> bool:
        return command.salary is not None

    def validate(
        self, command: CreateExampleCommand | UpdateExampleCommand
    ) -> list[ValidationError]:
        salary_range = self.config.salary_range()
        if salary_range.is_in(command.salary):
            return []
        return [
            ValidationError.of(
                ExampleErrorCode.SALARY_OUT_OF_RANGE,
                {
                    ExampleValidationField.SALARY: command.salary,
                    ExampleValidationField.MIN: salary_range.from_,
                    ExampleValidationField.MAX: salary_range.to,
                },
            )
        ]


def create_example_validator(
    storage: ExampleStoragePort, config: ExampleConfigPort
) -> CommandValidator[CreateExampleCommand]:
    return CommandValidator(
        [EmailRule(storage), CountryRule(config), SalaryRule(config)]
    )


def update_example_validator(
    config: ExampleConfigPort,
) -> CommandValidator[UpdateExampleCommand]:
    return CommandValidator([CountryRule(config), SalaryRule(config)])
