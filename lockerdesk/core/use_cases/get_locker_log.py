from __future__ import annotations

from lockerdesk.core.entities.locker_log import LockerLog
from lockerdesk.core.errors import NotFoundError
from lockerdesk.core.repositories.locker_log_repository import LockerLogRepository
from lockerdesk.core.repositories.locker_repository import LockerRepository


class GetLockerLogUseCase:
    """
    Full audit history of a locker, oldest first. Entries written under the
    same locker number before a delete/re-create are included.
    """

    def __init__(self, *, locker_repo: LockerRepository, log_repo: LockerLogRepository) -> None:
        self._locker_repo = locker_repo
        self._log_repo = log_repo

    def execute(self, *, locker_id: str) -> list[LockerLog]:
        locker = self._locker_repo.find_by_id(locker_id)
        if locker is None:
            raise NotFoundError("Locker not found")
        return self._log_repo.find_by_locker_number(locker.locker_number)
