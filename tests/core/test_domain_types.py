"""Domain Types: UserPatch supplied-field semantics."""

from user_api.core.domain_types import UNSET, UserId, UserPatch, UserRecord


def test_user_id_wraps_int():
    assert UserId(5) == 5


def test_patch_changes_skip_unset_fields():
    assert UserPatch(name="Ann").changes() == {"name": "Ann"}
    assert UserPatch(email=None).changes() == {"email": None}
    assert UserPatch().changes() == {}


def test_patch_defaults_are_unset():
    patch = UserPatch()
    assert patch.name is UNSET
    assert patch.email is UNSET
    assert patch.is_empty


def test_user_record_equality_is_by_value():
    assert UserRecord(1, "Ann", None) == UserRecord(id=1, name="Ann", email=None)
