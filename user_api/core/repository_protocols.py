"""Boundary Protocols: contract between the user handler and persistence.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Implementations raise UniqueViolationError(field) on unique conflicts and
      GatewayError for every other storage fault (core/errors.py)
    - Methods return UserRecord values, never ORM objects

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO; the handler awaits them
"""

from typing import Protocol

from user_api.core.domain_types import NewUser, UserId, UserRecord


class UserRepository(Protocol):
    """Contract for user persistence: implemented by shell."""
    async def list_all(self) -> list[UserRecord]: ...
    async def get(self, user_id: UserId) -> UserRecord | None: ...
    async def create(self, new_user: NewUser) -> UserRecord: ...
    async def update(
        self, user_id: UserId, changes: dict[str, str | None],
    ) -> UserRecord | None: ...
    async def delete(self, user_id: UserId) -> bool: ...
