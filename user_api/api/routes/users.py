"""User Routes: HTTP surface for the user resource.

Invariants:
    - Path ids arrive as raw strings; validate_id() owns the integer check
    - Bodies arrive as raw JSON (Any); the handler validates them, so an update on a
      missing user reports 404 before any body error
    - POST answers 201, every other success 200

Design Decisions:
    - get_user_handlers dependency builds handler + SQL repository per request:
      tests override it to inject an in-memory repository
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.infrastructure.database import get_db
from user_api.infrastructure.sql_user_repository import SqlUserRepository
from user_api.services.user_handlers import UserHandlers

router = APIRouter(prefix="/users", tags=["users"])


def get_user_handlers(db: AsyncSession = Depends(get_db)) -> UserHandlers:
    return UserHandlers(SqlUserRepository(db))


@router.get("")
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    """List all users ordered by id."""
    return await handlers.list_users()


@router.get("/{user_id}")
async def get_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    return await handlers.get_user(user_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Any = Body(None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    return await handlers.create_user(payload)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: Any = Body(None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Partial update: only supplied fields change."""
    return await handlers.update_user(user_id, payload)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    return await handlers.delete_user(user_id)
