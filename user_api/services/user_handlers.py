"""User Handlers: list, get, create, update, delete over an injected UserRepository.

Invariants:
    - Validation happens before any storage access, except that update/delete
      check existence FIRST: a missing user yields NotFound even when the body is invalid
    - Gateway signals are translated here: UniqueViolationError(email) -> EmailExistsError,
      every other GatewayError -> StorageError carrying the underlying message
    - Success returns the envelope dict; failures raise UserApiError subclasses
    - No retries: every fault reaches the caller immediately

Design Decisions:
    - Repository injected at construction (Protocol): tests swap in an in-memory fake
    - Existence-before-validation ordering is client-visible (ADR: product decision,
      revisit with the API consumers before changing it)
    - Empty patch skips the write and returns the current user
"""

import logging
from typing import Any, Awaitable, TypeVar

from user_api.core.domain_types import UserId, UserRecord
from user_api.core.envelope import success_envelope
from user_api.core.errors import (
    EmailExistsError, GatewayError, NotFoundError, StorageError,
    UniqueViolationError,
)
from user_api.core.repository_protocols import UserRepository
from user_api.core.validate_user import (
    validate_create, validate_id, validate_update,
)
from user_api.schemas.user import UserRead

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserHandlers:
    """CRUD operations for the user resource."""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def list_users(self) -> dict:
        """All users ascending by id."""
        users = await self._call(self.repo.list_all(), "fetch users")
        return success_envelope(
            [_serialize(user) for user in users], count=len(users),
        )

    async def get_user(self, raw_id: Any) -> dict:
        user_id = validate_id(raw_id)
        user = await self._require(user_id, "fetch user")
        return success_envelope(_serialize(user))

    async def create_user(self, payload: Any) -> dict:
        new_user = validate_create(payload)
        created = await self._call(self.repo.create(new_user), "create user")
        logger.info("User created", extra={"user_id": created.id})
        return success_envelope(
            _serialize(created), message="User created successfully",
        )

    async def update_user(self, raw_id: Any, payload: Any) -> dict:
        """Partial update: existence is checked before the body is validated."""
        user_id = validate_id(raw_id)
        existing = await self._require(user_id, "update user")
        patch = validate_update(payload)

        if patch.is_empty:
            updated: UserRecord | None = existing
        else:
            updated = await self._call(
                self.repo.update(user_id, patch.changes()), "update user",
            )
        if updated is None:
            # deleted between the existence check and the write
            raise NotFoundError(user_id)

        logger.info("User updated", extra={"user_id": user_id})
        return success_envelope(
            _serialize(updated), message="User updated successfully",
        )

    async def delete_user(self, raw_id: Any) -> dict:
        """Hard delete. The envelope carries a message and no data."""
        user_id = validate_id(raw_id)
        await self._require(user_id, "delete user")
        deleted = await self._call(self.repo.delete(user_id), "delete user")
        if not deleted:
            raise NotFoundError(user_id)
        logger.info("User deleted", extra={"user_id": user_id})
        return success_envelope(message="User deleted successfully")

    async def _require(self, user_id: UserId, operation: str) -> UserRecord:
        user = await self._call(self.repo.get(user_id), operation)
        if user is None:
            raise NotFoundError(user_id)
        return user

    async def _call(self, awaitable: Awaitable[T], operation: str) -> T:
        """Await a gateway call, translating gateway signals into API errors."""
        try:
            return await awaitable
        except UniqueViolationError as e:
            if e.field == "email":
                raise EmailExistsError() from e
            raise StorageError(e.message, operation) from e
        except GatewayError as e:
            raise StorageError(e.message, operation) from e


def _serialize(user: UserRecord) -> dict:
    return UserRead.model_validate(user).model_dump()
