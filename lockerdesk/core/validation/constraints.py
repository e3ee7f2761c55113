from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

# lockers.locker_number is a plain INTEGER column
MAX_LOCKER_NUMBER = 2**31 - 1


class LockerLocationConstraints(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(min_length=1, max_length=255, pattern=r"\S")
    description: str = Field(default="", max_length=1000)


class _LocationRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(min_length=1)


class LockerConstraints(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    locker_number: StrictInt = Field(gt=0, le=MAX_LOCKER_NUMBER)
    is_active: StrictBool
    location: _LocationRef
