from __future__ import annotations

from abc import ABC, abstractmethod

from lockerdesk.core.entities.locker import Locker


class LockerRepository(ABC):
    """
    Repository interface for Locker persistence.

    Write methods return the stored locker, or None when the store could not
    apply the change.
    """

    @abstractmethod
    def find_by_id(self, locker_id: str) -> Locker | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_locker_number(self, locker_number: int) -> Locker | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_location_id(self, location_id: str) -> list[Locker]:
        """Lockers at a location, ordered by locker number."""
        raise NotImplementedError

    @abstractmethod
    def create(self, locker: Locker) -> Locker | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, locker: Locker) -> Locker | None:
        """Persist activation and assignment state."""
        raise NotImplementedError

    @abstractmethod
    def update_location(self, locker_id: str, locker: Locker) -> Locker | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, locker: Locker) -> None:
        raise NotImplementedError

    @abstractmethod
    def count_by_location(self, location_id: str) -> int:
        raise NotImplementedError

    @abstractmethod
    def count_enabled_by_location(self, location_id: str) -> int:
        raise NotImplementedError
