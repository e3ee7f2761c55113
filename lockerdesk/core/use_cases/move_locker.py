from __future__ import annotations

import logging

from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.entities.locker_log import LockerLogAction
from lockerdesk.core.errors import ConflictError, InternalError, NotFoundError
from lockerdesk.core.repositories.locker_location_repository import LockerLocationRepository
from lockerdesk.core.repositories.locker_log_repository import LockerLogRepository
from lockerdesk.core.repositories.locker_repository import LockerRepository
from lockerdesk.core.repositories.user_repository import UserRepository
from lockerdesk.core.use_cases.actor import LOCKER_MANAGER_ROLES, actor_bucket, resolve_actor
from lockerdesk.core.validation.constraints import LockerConstraints
from lockerdesk.core.validation.validator_bucket import ValidatorBucket
from lockerdesk.core.validation.validators import ConstraintValidator

logger = logging.getLogger(__name__)


class MoveLockerUseCase:
    """
    Relocates a locker. The locker comes out of the move deactivated and
    must be re-enabled before it can be granted again.
    """

    def __init__(
            self,
            *,
            user_repo: UserRepository,
            locker_repo: LockerRepository,
            location_repo: LockerLocationRepository,
            log_repo: LockerLogRepository,
            log_moves: bool = True,
    ) -> None:
        self._user_repo = user_repo
        self._locker_repo = locker_repo
        self._location_repo = location_repo
        self._log_repo = log_repo
        self._log_moves = log_moves

    def execute(self, *, actor_id: str, locker_id: str, location_id: str) -> Locker:
        actor = resolve_actor(self._user_repo, actor_id)
        actor_bucket(actor, LOCKER_MANAGER_ROLES).validate()

        locker = self._locker_repo.find_by_id(locker_id)
        if locker is None:
            raise NotFoundError("Locker not found")

        location = self._location_repo.find_by_id(location_id)
        if location is None:
            raise NotFoundError("Locker location not found")

        try:
            moved = locker.relocated_to(location)
        except ValueError as e:
            raise ConflictError(str(e)) from e

        ValidatorBucket.of().consist_of(ConstraintValidator(moved, LockerConstraints)).validate()

        stored = self._locker_repo.update_location(locker_id, moved)
        if stored is None:
            logger.error("Locker store returned nothing when moving locker %s", locker_id)
            raise InternalError("Locker id checked, but exception occurred")

        if self._log_moves:
            self._log_repo.create(stored.locker_number, actor, LockerLogAction.MOVE, f"relocated to {location.name}")
        logger.info("Locker #%s moved to %s by %s", stored.locker_number, location.name, actor.id)
        return stored
