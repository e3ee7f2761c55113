from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from lockerdesk.core.entities.locker_log import LockerLog, LockerLogAction
from lockerdesk.core.entities.user import User
from lockerdesk.core.repositories.locker_log_repository import LockerLogRepository
from lockerdesk.infrastructure.models.models import LockerLogModel
from lockerdesk.infrastructure.repositories.mappers import to_log


class LockerLogRepositoryImpl(LockerLogRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, locker_number: int, actor: User, action: LockerLogAction, message: str) -> LockerLog:
        row = LockerLogModel(
            locker_number=locker_number,
            actor_id=actor.id,
            actor_name=actor.name,
            action=action,
            message=message or "",
        )
        self._db.add(row)
        self._db.flush()
        return to_log(row)

    def find_by_locker_number(self, locker_number: int) -> list[LockerLog]:
        # id breaks ties between entries written within the same clock tick
        rows = self._db.scalars(
            select(LockerLogModel)
            .where(LockerLogModel.locker_number == locker_number)
            .order_by(LockerLogModel.created_at, LockerLogModel.id)
        )
        return [to_log(row) for row in rows]
