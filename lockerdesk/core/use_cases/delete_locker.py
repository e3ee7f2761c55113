from __future__ import annotations

import logging

from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.entities.locker_log import LockerLogAction
from lockerdesk.core.errors import ConflictError, NotFoundError
from lockerdesk.core.repositories.locker_log_repository import LockerLogRepository
from lockerdesk.core.repositories.locker_repository import LockerRepository
from lockerdesk.core.repositories.user_repository import UserRepository
from lockerdesk.core.use_cases.actor import LOCKER_MANAGER_ROLES, actor_bucket, resolve_actor

logger = logging.getLogger(__name__)


class DeleteLockerUseCase:
    """
    Removes an unassigned locker. Its log history stays, keyed by number.
    Returns the last known state of the deleted locker.
    """

    def __init__(
            self,
            *,
            user_repo: UserRepository,
            locker_repo: LockerRepository,
            log_repo: LockerLogRepository,
    ) -> None:
        self._user_repo = user_repo
        self._locker_repo = locker_repo
        self._log_repo = log_repo

    def execute(self, *, actor_id: str, locker_id: str) -> Locker:
        actor = resolve_actor(self._user_repo, actor_id)
        actor_bucket(actor, LOCKER_MANAGER_ROLES).validate()

        locker = self._locker_repo.find_by_id(locker_id)
        if locker is None:
            raise NotFoundError("Locker not found")

        if locker.in_use:
            raise ConflictError("Locker is in use")

        self._locker_repo.delete(locker)

        self._log_repo.create(locker.locker_number, actor, LockerLogAction.DISABLE, "deletion")
        logger.info("Locker #%s deleted by %s", locker.locker_number, actor.id)
        return locker
