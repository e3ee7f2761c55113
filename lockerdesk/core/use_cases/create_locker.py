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


class CreateLockerUseCase:
    """
    Registers a new locker at an existing location. The locker starts active
    and unassigned, and an ENABLE entry opens its audit history.
    """

    def __init__(
            self,
            *,
            user_repo: UserRepository,
            locker_repo: LockerRepository,
            location_repo: LockerLocationRepository,
            log_repo: LockerLogRepository,
    ) -> None:
        self._user_repo = user_repo
        self._locker_repo = locker_repo
        self._location_repo = location_repo
        self._log_repo = log_repo

    def execute(self, *, actor_id: str, locker_number: int, location_id: str) -> Locker:
        actor = resolve_actor(self._user_repo, actor_id)
        actor_bucket(actor, LOCKER_MANAGER_ROLES).validate()

        location = self._location_repo.find_by_id(location_id)
        if location is None:
            raise NotFoundError("Locker location not found")

        locker = Locker(locker_number=locker_number, location=location)
        ValidatorBucket.of().consist_of(ConstraintValidator(locker, LockerConstraints)).validate()

        if self._locker_repo.find_by_locker_number(locker.locker_number) is not None:
            raise ConflictError(f"Locker number {locker_number} already exists")

        created = self._locker_repo.create(locker)
        if created is None:
            logger.error("Locker store returned nothing for validated locker #%s", locker_number)
            raise InternalError("Exception occurred when creating locker")

        self._log_repo.create(created.locker_number, actor, LockerLogAction.ENABLE, "initial creation")
        logger.info("Locker #%s created at %s by %s", created.locker_number, location.name, actor.id)
        return created
