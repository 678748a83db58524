"""User Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserCreate.name: string, stripped, non-empty
    - email: string or null; stripped, whitespace-only collapses to null
      (stored as null, not "", so blank emails never collide on the unique index)
    - UserUpdate: every field optional, but a supplied name may not be null
    - No type coercion: 123 is not a name (StrictStr)

Design Decisions:
    - field_validator for side-effect-free transforms (strip): keeps models pure
    - Unknown keys ignored (pydantic default), matching the lenient JSON contract
"""

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class UserCreate(BaseModel):
    """User creation: name required, email optional."""
    name: StrictStr
    email: StrictStr | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str | None) -> str | None:
        return _strip_optional(v)


class UserUpdate(BaseModel):
    """Partial user update: only supplied fields end up in model_fields_set."""
    name: StrictStr | None = None
    email: StrictStr | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("name cannot be null")
        return _strip_required(v)

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str | None) -> str | None:
        return _strip_optional(v)


class UserRead(BaseModel):
    """User response: public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str | None = None


# --- Validation helpers -------------------------------------------------------


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


def _strip_optional(v: str | None) -> str | None:
    if v is None:
        return None
    return v.strip() or None
