"""Generic building blocks shared by every domain module."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")
N = TypeVar("N")


@dataclass(frozen=True, slots=True)
class VersionedEntity(Generic[T]):
    """Envelope giving a domain payload identity, version and timestamps.

    ``version`` is 0 when the entity is first built; after that only the
    storage layer bumps it, once per successful write.
    """

    id: UUID
    created_at: datetime
    updated_at: datetime
    data: T
    version: int = 0

    def __post_init__(self) -> None:
        if self.version < 0:
            raise ValueError(f"version must be non-negative, got {self.version}")
        if self.created_at > self.updated_at:
            raise ValueError("created_at must not be after updated_at")


@dataclass(frozen=True, slots=True)
class Range(Generic[N]):
    """Inclusive range; a missing bound leaves that side open."""

    from_: N | None = None
    to: N | None = None

    def is_in(self, value: N) -> bool:
        return (self.from_ is None or value >= self.from_) and (
            self.to is None or value <= self.to
        )
