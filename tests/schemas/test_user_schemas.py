"""User Schemas: strict types, stripping, supplied-field tracking."""

import pytest
from pydantic import ValidationError

from user_api.core.domain_types import UserRecord
from user_api.schemas.user import UserCreate, UserRead, UserUpdate


def test_user_create_strips_name():
    assert UserCreate(name="  Ann ").name == "Ann"


def test_user_create_does_not_coerce_numbers():
    with pytest.raises(ValidationError):
        UserCreate(name=123)


def test_user_update_tracks_only_supplied_fields():
    model = UserUpdate.model_validate({"email": None})
    assert model.model_fields_set == {"email"}
    assert model.model_dump(exclude_unset=True) == {"email": None}


def test_user_update_rejects_explicit_null_name():
    with pytest.raises(ValidationError):
        UserUpdate.model_validate({"name": None})


def test_user_read_from_record():
    read = UserRead.model_validate(UserRecord(1, "Ann", "a@b.io"))
    assert read.model_dump() == {"id": 1, "name": "Ann", "email": "a@b.io"}
