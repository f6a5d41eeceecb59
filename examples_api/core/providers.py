"""Injectable sources of identity and time.

Use cases never call ``uuid4()`` or ``datetime.now()`` directly so tests can
pin both values.
"""

import hashlib
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol
from uuid import UUID


def uuid_of(*params: Any) -> UUID:
    """Random UUID without params, otherwise a name-based (MD5) one.

    The same params always give the same UUID, e.g. to derive stable ids
    from natural keys.
    """
    if not params:
        return uuid.uuid4()
    digest = hashlib.md5(", ".join(str(p) for p in params).encode("utf-8")).digest()
    return UUID(bytes=digest, version=3)


class TimeProvider(Protocol):
    def now(self) -> datetime: ...

    def add(self, instant: datetime, duration: timedelta) -> datetime: ...


class IdProvider(Protocol):
    def generate(self, *params: Any) -> UUID: ...


class SystemTimeProvider:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def add(self, instant: datetime, duration: timedelta) -> datetime:
        return instant + duration


class UUIDProvider:
    def generate(self, *params: Any) -> UUID:
        return uuid_of(*params)
