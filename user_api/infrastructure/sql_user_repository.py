"""SQL User Repository: async SQLAlchemy implementation of UserRepository.

Invariants:
    - Every commit failure rolls the session back before raising
    - IntegrityError on a unique column -> UniqueViolationError(column)
    - Any other SQLAlchemyError -> GatewayError carrying the driver message
    - Returns UserRecord values; ORM rows never leave this module
    - Ids outside the column range are absent, never sent to the driver

Design Decisions:
    - Constraint detection by column name in the driver message: works for both
      SQLite ("UNIQUE constraint failed: users.email") and PostgreSQL
      ("... unique constraint \"users_email_key\"") without engine-specific codes
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.domain_types import NewUser, UserId, UserRecord
from user_api.core.errors import GatewayError, UniqueViolationError
from user_api.models.user import USER_ID_MAX, USER_ID_MIN, User

logger = logging.getLogger(__name__)

_UNIQUE_COLUMNS = ("email",)


class SqlUserRepository:
    """User persistence over a request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[UserRecord]:
        try:
            result = await self.db.execute(select(User).order_by(User.id.asc()))
        except SQLAlchemyError as e:
            raise GatewayError(_describe(e)) from e
        return [_to_record(user) for user in result.scalars().all()]

    async def get(self, user_id: UserId) -> UserRecord | None:
        user = await self._find(user_id)
        return _to_record(user) if user else None

    async def create(self, new_user: NewUser) -> UserRecord:
        user = User(name=new_user.name, email=new_user.email)
        self.db.add(user)
        await self._commit()
        return _to_record(user)

    async def update(
        self, user_id: UserId, changes: dict[str, str | None],
    ) -> UserRecord | None:
        user = await self._find(user_id)
        if user is None:
            return None
        for column, value in changes.items():
            setattr(user, column, value)
        await self._commit()
        return _to_record(user)

    async def delete(self, user_id: UserId) -> bool:
        user = await self._find(user_id)
        if user is None:
            return False
        await self.db.delete(user)
        await self._commit()
        return True

    async def _find(self, user_id: UserId) -> User | None:
        if not USER_ID_MIN <= user_id <= USER_ID_MAX:
            return None
        try:
            result = await self.db.execute(
                select(User).where(User.id == user_id),
            )
        except SQLAlchemyError as e:
            raise GatewayError(_describe(e)) from e
        return result.scalar_one_or_none()

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise _translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"User commit failed: {e}")
            raise GatewayError(_describe(e)) from e


def _to_record(user: User) -> UserRecord:
    return UserRecord(id=user.id, name=user.name, email=user.email)


def _describe(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _translate_integrity_error(exc: IntegrityError) -> GatewayError:
    detail = _describe(exc)
    lowered = detail.lower()
    if "unique" in lowered or "duplicate" in lowered:
        for column in _UNIQUE_COLUMNS:
            if column in lowered:
                return UniqueViolationError(column, detail)
    return GatewayError(detail)
