"""Domain failure values and the stable error codes exposed to API consumers.

Use cases return these failures instead of raising them; only the API
boundary turns them into HTTP responses. Exceptions are left for
conditions nobody anticipated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NotFound"
BAD_REQUEST = "BadRequest"
INTERNAL_ERROR = "InternalError"
FORBIDDEN_ACCESS = "ForbiddenAccess"
OUTDATED_VERSION = "OutdatedVersion"
DUPLICATED_KEY = "DuplicatedKey"

DEFAULT_MESSAGES: dict[str, str] = {
    NOT_FOUND: "The requested object is not found",
    BAD_REQUEST: "The request is malformed",
    INTERNAL_ERROR: "An internal error occurred, please contact support",
    FORBIDDEN_ACCESS: "Access to the requested object is forbidden",
    OUTDATED_VERSION: "The object was modified by someone else, reload it and try again",
    DUPLICATED_KEY: "The object already exists",
}


class ValidationCode(Enum):
    """Base for business-rule error codes.

    The member name is the wire code and the member value its default message.
    """

    @property
    def code(self) -> str:
        return self.name

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationError:
    """One error: a code, its default message and a context bag."""

    code: str
    message: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def of(
        cls, code: ValidationCode, attributes: Mapping[str, Any] | None = None
    ) -> ValidationError:
        return cls(code=code.code, message=code.message, attributes=dict(attributes or {}))

    @classmethod
    def common(cls, code: str, attributes: Mapping[str, Any] | None = None) -> ValidationError:
        return cls(code=code, message=DEFAULT_MESSAGES[code], attributes=dict(attributes or {}))


class FailureCategory(str, Enum):
    """How the transport layer should classify a failure."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    UNPROCESSABLE = "unprocessable"
    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Failure:
    """Base for every domain failure value."""

    category: ClassVar[FailureCategory]

    def to_errors(self) -> list[ValidationError]:
        raise NotImplementedError


@dataclass(frozen=True)
class ValidationFailure(Failure):
    """One or more business rules were violated."""

    category: ClassVar[FailureCategory] = FailureCategory.UNPROCESSABLE

    errors: tuple[ValidationError, ...]

    def to_errors(self) -> list[ValidationError]:
        return list(self.errors)


@dataclass(frozen=True)
class _ModelFailure(Failure):
    code: ClassVar[str]

    model: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def to_errors(self) -> list[ValidationError]:
        return [ValidationError.common(self.code, {"model": self.model, **self.params})]


@dataclass(frozen=True)
class ModelNotFound(_ModelFailure):
    """A lookup by identity found nothing."""

    category: ClassVar[FailureCategory] = FailureCategory.NOT_FOUND
    code: ClassVar[str] = NOT_FOUND


@dataclass(frozen=True)
class ModelDuplicated(_ModelFailure):
    """Storage rejected a write because of a uniqueness constraint."""

    category: ClassVar[FailureCategory] = FailureCategory.CONFLICT
    code: ClassVar[str] = DUPLICATED_KEY


@dataclass(frozen=True)
class OutdatedVersion(_ModelFailure):
    """The stored version moved on since the caller read the entity."""

    category: ClassVar[FailureCategory] = FailureCategory.CONFLICT
    code: ClassVar[str] = OUTDATED_VERSION


@dataclass(frozen=True)
class BadRequest(Failure):
    category: ClassVar[FailureCategory] = FailureCategory.BAD_REQUEST

    attributes: Mapping[str, Any] = field(default_factory=dict)

    def to_errors(self) -> list[ValidationError]:
        return [ValidationError.common(BAD_REQUEST, self.attributes)]


@dataclass(frozen=True)
class Forbidden(Failure):
    category: ClassVar[FailureCategory] = FailureCategory.FORBIDDEN

    attributes: Mapping[str, Any] = field(default_factory=dict)

    def to_errors(self) -> list[ValidationError]:
        return [ValidationError.common(FORBIDDEN_ACCESS, self.attributes)]


T = TypeVar("T")

# Success value or a domain failure; check with isinstance(result, Failure).
Result = Union[T, Failure]
