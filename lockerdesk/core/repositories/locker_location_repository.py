from __future__ import annotations

from abc import ABC, abstractmethod

from lockerdesk.core.entities.locker_location import LockerLocation


class LockerLocationRepository(ABC):
    @abstractmethod
    def find_by_id(self, location_id: str) -> LockerLocation | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_name(self, name: str) -> LockerLocation | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[LockerLocation]:
        raise NotImplementedError

    @abstractmethod
    def create(self, location: LockerLocation) -> LockerLocation:
        raise NotImplementedError

    @abstractmethod
    def update(self, location_id: str, location: LockerLocation) -> LockerLocation | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, location: LockerLocation) -> None:
        raise NotImplementedError
