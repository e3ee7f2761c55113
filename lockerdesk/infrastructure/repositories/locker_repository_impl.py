from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.repositories.locker_repository import LockerRepository
from lockerdesk.infrastructure.models.models import LockerModel
from lockerdesk.infrastructure.repositories.mappers import to_locker


class LockerRepositoryImpl(LockerRepository):
    """
    SQLAlchemy implementation for Locker.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, locker_id: str) -> Locker | None:
        row = self._db.get(LockerModel, locker_id)
        if row is None:
            return None
        return to_locker(row)

    def find_by_locker_number(self, locker_number: int) -> Locker | None:
        row = self._db.scalars(
            select(LockerModel).where(LockerModel.locker_number == locker_number)
        ).first()
        if row is None:
            return None
        return to_locker(row)

    def find_by_location_id(self, location_id: str) -> list[Locker]:
        rows = self._db.scalars(
            select(LockerModel)
            .where(LockerModel.location_id == location_id)
            .order_by(LockerModel.locker_number)
        )
        return [to_locker(row) for row in rows]

    def create(self, locker: Locker) -> Locker | None:
        row = LockerModel(
            locker_number=locker.locker_number,
            is_active=locker.is_active,
            user_id=locker.user.id if locker.user is not None else None,
            location_id=locker.location.id,
        )
        if locker.updated_at is not None:
            row.updated_at = locker.updated_at

        self._db.add(row)
        self._db.flush()
        self._db.refresh(row)
        return to_locker(row)

    def update(self, locker: Locker) -> Locker | None:
        row = self._db.get(LockerModel, locker.id)
        if row is None:
            return None

        row.is_active = locker.is_active
        row.user_id = locker.user.id if locker.user is not None else None
        if locker.updated_at is not None:
            row.updated_at = locker.updated_at

        self._db.flush()
        self._db.refresh(row)
        return to_locker(row)

    def update_location(self, locker_id: str, locker: Locker) -> Locker | None:
        row = self._db.get(LockerModel, locker_id)
        if row is None:
            return None

        row.location_id = locker.location.id
        row.is_active = locker.is_active
        if locker.updated_at is not None:
            row.updated_at = locker.updated_at

        self._db.flush()
        self._db.refresh(row)
        return to_locker(row)

    def delete(self, locker: Locker) -> None:
        row = self._db.get(LockerModel, locker.id)
        if row is not None:
            self._db.delete(row)
            self._db.flush()

    def count_by_location(self, location_id: str) -> int:
        return self._db.scalar(
            select(func.count(LockerModel.id)).where(LockerModel.location_id == location_id)
        ) or 0

    def count_enabled_by_location(self, location_id: str) -> int:
        return self._db.scalar(
            select(func.count(LockerModel.id))
            .where(LockerModel.location_id == location_id)
            .where(LockerModel.is_active.is_(True))
        ) or 0
