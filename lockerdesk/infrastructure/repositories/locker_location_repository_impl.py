from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from lockerdesk.core.entities.locker_location import LockerLocation
from lockerdesk.core.repositories.locker_location_repository import LockerLocationRepository
from lockerdesk.infrastructure.models.models import LockerLocationModel
from lockerdesk.infrastructure.repositories.mappers import to_location


class LockerLocationRepositoryImpl(LockerLocationRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, location_id: str) -> LockerLocation | None:
        row = self._db.get(LockerLocationModel, location_id)
        if row is None:
            return None
        return to_location(row)

    def find_by_name(self, name: str) -> LockerLocation | None:
        row = self._db.scalars(
            select(LockerLocationModel).where(LockerLocationModel.name == name)
        ).first()
        if row is None:
            return None
        return to_location(row)

    def find_all(self) -> list[LockerLocation]:
        rows = self._db.scalars(select(LockerLocationModel).order_by(LockerLocationModel.name))
        return [to_location(row) for row in rows]

    def create(self, location: LockerLocation) -> LockerLocation:
        row = LockerLocationModel(name=location.name, description=location.description)
        self._db.add(row)
        self._db.flush()
        return to_location(row)

    def update(self, location_id: str, location: LockerLocation) -> LockerLocation | None:
        row = self._db.get(LockerLocationModel, location_id)
        if row is None:
            return None

        row.name = location.name
        row.description = location.description

        self._db.flush()
        return to_location(row)

    def delete(self, location: LockerLocation) -> None:
        row = self._db.get(LockerLocationModel, location.id)
        if row is not None:
            self._db.delete(row)
            self._db.flush()
