"""Domain Types: normalized values that flow between validator, handler and gateway.

Invariants:
    - UserId wraps int: path params are converted once by validate_id()
    - NewUser.name is trimmed and non-empty; NewUser.email is trimmed or None
    - UserPatch carries only the fields the caller supplied (UNSET marks the rest)
    - UserRecord is what the gateway returns: never an ORM row

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - UNSET sentinel over Optional: email=None is a meaningful patch value ("clear")
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


UserId = NewType("UserId", int)


class _Unset(Enum):
    UNSET = "unset"


UNSET = _Unset.UNSET


@dataclass(frozen=True)
class UserRecord:
    """Stored user as reported by the persistence gateway."""
    id: int
    name: str
    email: str | None


@dataclass(frozen=True)
class NewUser:
    """Validated create payload."""
    name: str
    email: str | None = None


@dataclass(frozen=True)
class UserPatch:
    """Validated partial update payload."""
    name: str | _Unset = UNSET
    email: str | None | _Unset = UNSET

    def changes(self) -> dict[str, str | None]:
        """Supplied fields only, keyed by column name."""
        return {
            key: value
            for key, value in (("name", self.name), ("email", self.email))
            if value is not UNSET
        }

    @property
    def is_empty(self) -> bool:
        return not self.changes()
