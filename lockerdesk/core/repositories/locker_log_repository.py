from __future__ import annotations

from abc import ABC, abstractmethod

from lockerdesk.core.entities.locker_log import LockerLog, LockerLogAction
from lockerdesk.core.entities.user import User


class LockerLogRepository(ABC):
    """
    Append-only audit log. Entries are never updated or deleted.
    """

    @abstractmethod
    def create(self, locker_number: int, actor: User, action: LockerLogAction, message: str) -> LockerLog:
        raise NotImplementedError

    @abstractmethod
    def find_by_locker_number(self, locker_number: int) -> list[LockerLog]:
        """Entries for one locker number, oldest first."""
        raise NotImplementedError
