from __future__ import annotations

from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.errors import NotFoundError
from lockerdesk.core.repositories.locker_location_repository import LockerLocationRepository
from lockerdesk.core.repositories.locker_repository import LockerRepository


class GetLockerUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, locker_id: str) -> Locker:
        locker = self._locker_repo.find_by_id(locker_id)
        if locker is None:
            raise NotFoundError("Locker not found")
        return locker


class ListLockersByLocationUseCase:
    def __init__(self, *, locker_repo: LockerRepository, location_repo: LockerLocationRepository) -> None:
        self._locker_repo = locker_repo
        self._location_repo = location_repo

    def execute(self, *, location_id: str) -> list[Locker]:
        location = self._location_repo.find_by_id(location_id)
        if location is None:
            raise NotFoundError("Locker location not found")
        return self._locker_repo.find_by_location_id(location.id)
