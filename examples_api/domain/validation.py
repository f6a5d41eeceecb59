"""Composable business-rule validation.

A ``CommandValidator`` runs every applicable rule, in ascending ``order``,
and collects all of their errors. It never stops at the first failing rule:
a caller must be able to fix every violation in a single round trip.

Rules only read through ports. They must not mutate anything, so running a
validator twice on the same command gives the same result.
"""

from collections.abc import Iterable
from operator import attrgetter
from typing import Generic, TypeVar

from examples_api.errors import ValidationError, ValidationFailure

C = TypeVar("C")


class ValidationRule(Generic[C]):
    """A single business check over a command.

    Subclasses override ``validate`` and, when needed, ``order`` and
    ``is_applicable``. Rules with equal ``order`` keep their declaration order.
    """

    order: int = 0

    def is_applicable(self, command: C) -> bool:
        return True

    def validate(self, command: C) -> list[ValidationError]:
        raise NotImplementedError


class CommandValidator(Generic[C]):
    def __init__(self, rules: Iterable[ValidationRule[C]]):
        # sorted() is stable, so ties stay in declaration order
        self.rules: tuple[ValidationRule[C], ...] = tuple(
            sorted(rules, key=attrgetter("order"))
        )

    def validate(self, command: C) -> ValidationFailure | None:
        """Return ``None`` when every rule passes, else all errors at once."""
        errors = [
            error
            for rule in self.rules
            if rule.is_applicable(command)
            for error in rule.validate(command)
        ]
        if errors:
            return ValidationFailure(errors=tuple(errors))
        return None
