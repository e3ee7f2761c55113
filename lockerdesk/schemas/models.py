from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel, Field

from lockerdesk.core.entities.locker_log import LockerLogAction
from lockerdesk.core.validation.constraints import MAX_LOCKER_NUMBER


class LockerCreateRequest(BaseModel):
    locker_number: int = Field(le=MAX_LOCKER_NUMBER)
    location_id: str


class LockerUpdateRequest(BaseModel):
    # kept as a plain string so unknown codes reach the core and come back as 400
    action: str
    message: str = ""
    user_id: str | None = None


class LockerMoveRequest(BaseModel):
    location_id: str


class LockerResponse(BaseModel):
    id: str
    locker_number: int
    is_active: bool
    updated_at: datetime | None
    user_id: str | None
    user_name: str | None
    location_id: str


class LockerLocationCreateRequest(BaseModel):
    name: str
    description: str = ""


class LockerLocationUpdateRequest(BaseModel):
    name: str
    description: str = ""


class LockerLocationResponse(BaseModel):
    id: str
    name: str
    description: str
    enabled_locker_count: int
    total_locker_count: int


class LockerLogDetail(BaseModel):
    locker_number: int
    actor_id: str
    actor_name: str
    action: LockerLogAction
    message: str
    created_at: datetime


class ErrorResponse(BaseModel):
    detail: str
    error_code: str = Field(examples=["NOT_FOUND"])
