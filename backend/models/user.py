from typing import Callable, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError, field_validator

from errors import ValidationError

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 20
INVALID_USERNAME = (
    "Invalid username: it must be between 3 and 20 characters long "
    "and contain only alphanumeric characters"
)


class Username(BaseModel):
    """
    A display name that passed validation.

    Username("alice") is the only way to build one; a bad name raises
    errors.ValidationError with INVALID_USERNAME as its message.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    value: str

    def __init__(self, value: str, **data):
        try:
            super().__init__(value=value, **data)
        except PydanticValidationError as exc:
            raise ValidationError(INVALID_USERNAME) from exc

    @field_validator("value")
    @classmethod
    def check_value(cls, value: str) -> str:
        if not is_valid_username(value):
            raise ValueError(INVALID_USERNAME)
        return value

    def __str__(self) -> str:
        return self.value


def is_valid_username(value: str) -> bool:
    return (
        USERNAME_MIN_LEN <= len(value) <= USERNAME_MAX_LEN
        and all(ch.isalnum() for ch in value)
    )


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    uuid: UUID
    name: Username
    current_table_id: Optional[str] = None     # never set by the registry

    @classmethod
    def create(cls, name: str, new_id: Callable[[], UUID]) -> "User":
        # Validate before drawing an id so a bad name consumes nothing.
        username = Username(name)
        return cls(uuid=new_id(), name=username)
