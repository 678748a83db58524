"""User Validation: pure checks that run before any storage access.

Invariants:
    - validate_id accepts base-10 integers only ("12abc", "1.5", "" are rejected)
    - validate_create/validate_update raise InvalidFieldError naming the first bad field
    - Output is always normalized (trimmed): the handler never sees raw input
    - No IO, no async

Design Decisions:
    - Pydantic schemas do the type/strip work; this module maps ValidationError
      onto the InvalidField contract so the route never lets FastAPI validate
      the body (update must check existence first)
    - Name is checked before email (field order in the schema)
"""

import re
from typing import Any

from pydantic import BaseModel, ValidationError

from user_api.core.domain_types import NewUser, UserId, UserPatch
from user_api.core.errors import InvalidFieldError, InvalidIdError
from user_api.schemas.user import UserCreate, UserUpdate

_ID_PATTERN = re.compile(r"^[+-]?[0-9]+$")

_BODY_NOT_OBJECT = "Request body must be a JSON object"

_CREATE_MESSAGES = {
    "name": "Name is required and must be a non-empty string",
    "email": "Email must be a string",
}

_UPDATE_MESSAGES = {
    "name": "Name must be a non-empty string",
    "email": "Email must be a string",
}


def validate_id(raw: Any) -> UserId:
    """Parse a path identifier as a base-10 integer.

    Stricter than a parseInt-style reading: "12abc" and "1.5" are rejected
    rather than truncated to 12 and 1. Any magnitude is accepted here; ids the
    store cannot hold are reported as absent by the repository.
    """
    text = str(raw).strip() if raw is not None else ""
    if not _ID_PATTERN.match(text):
        raise InvalidIdError(str(raw))
    return UserId(int(text))


def validate_create(payload: Any) -> NewUser:
    """Validate a create body into a NewUser."""
    model = _parse(UserCreate, payload, _CREATE_MESSAGES)
    return NewUser(name=model.name, email=model.email)


def validate_update(payload: Any) -> UserPatch:
    """Validate an update body into a UserPatch holding only supplied fields."""
    model = _parse(UserUpdate, payload, _UPDATE_MESSAGES)
    return UserPatch(**model.model_dump(exclude_unset=True))


def _parse(schema: type[BaseModel], payload: Any, messages: dict[str, str]):
    if not isinstance(payload, dict):
        raise InvalidFieldError(_BODY_NOT_OBJECT)
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        field = _first_invalid_field(e)
        raise InvalidFieldError(
            messages.get(field, _BODY_NOT_OBJECT), field=field,
        ) from e


def _first_invalid_field(exc: ValidationError) -> str | None:
    for error in exc.errors():
        if error["loc"]:
            return str(error["loc"][0])
    return None
