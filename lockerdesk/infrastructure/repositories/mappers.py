from __future__ import annotations

from datetime import datetime, timezone

from lockerdesk.core.entities.locker import UNASSIGNED, Assigned, Locker
from lockerdesk.core.entities.locker_location import LockerLocation
from lockerdesk.core.entities.locker_log import LockerLog
from lockerdesk.core.entities.user import User
from lockerdesk.infrastructure.models.models import (
    LockerLocationModel,
    LockerLogModel,
    LockerModel,
    UserModel,
)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops the offset on DateTime(timezone=True) columns; stored values are UTC
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_user(row: UserModel) -> User:
    return User(id=row.id, name=row.name, role=row.role, state=row.state)


def to_location(row: LockerLocationModel) -> LockerLocation:
    return LockerLocation(id=row.id, name=row.name, description=row.description)


def to_locker(row: LockerModel) -> Locker:
    return Locker(
        id=row.id,
        locker_number=row.locker_number,
        is_active=row.is_active,
        updated_at=_as_utc(row.updated_at),
        assignment=Assigned(user=to_user(row.user)) if row.user is not None else UNASSIGNED,
        location=to_location(row.location),
    )


def to_log(row: LockerLogModel) -> LockerLog:
    return LockerLog(
        locker_number=row.locker_number,
        actor_id=row.actor_id,
        actor_name=row.actor_name,
        action=row.action,
        message=row.message,
        created_at=_as_utc(row.created_at),
    )
