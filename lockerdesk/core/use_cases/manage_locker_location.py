from __future__ import annotations

import logging

from lockerdesk.core.entities.locker_location import LockerLocation
from lockerdesk.core.errors import ConflictError, InternalError, NotFoundError
from lockerdesk.core.repositories.locker_location_repository import LockerLocationRepository
from lockerdesk.core.repositories.locker_repository import LockerRepository
from lockerdesk.core.repositories.user_repository import UserRepository
from lockerdesk.core.use_cases.actor import LOCKER_MANAGER_ROLES, actor_bucket, resolve_actor
from lockerdesk.core.use_cases.list_locker_locations import LockerLocationSummaryDTO, summarize
from lockerdesk.core.validation.constraints import LockerLocationConstraints
from lockerdesk.core.validation.validator_bucket import ValidatorBucket
from lockerdesk.core.validation.validators import ConstraintValidator

logger = logging.getLogger(__name__)


class _LocationUseCase:
    def __init__(
            self,
            *,
            user_repo: UserRepository,
            locker_repo: LockerRepository,
            location_repo: LockerLocationRepository,
    ) -> None:
        self._user_repo = user_repo
        self._locker_repo = locker_repo
        self._location_repo = location_repo

    def _authorize(self, actor_id: str) -> None:
        actor = resolve_actor(self._user_repo, actor_id)
        actor_bucket(actor, LOCKER_MANAGER_ROLES).validate()

    def _get_location(self, location_id: str) -> LockerLocation:
        location = self._location_repo.find_by_id(location_id)
        if location is None:
            raise NotFoundError("Locker location not found")
        return location

    def _ensure_name_free(self, name: str) -> None:
        if self._location_repo.find_by_name(name) is not None:
            raise ConflictError(f"Locker location {name!r} already exists")


class CreateLockerLocationUseCase(_LocationUseCase):
    def execute(self, *, actor_id: str, name: str, description: str = "") -> LockerLocationSummaryDTO:
        self._authorize(actor_id)

        location = LockerLocation(name=name, description=description)
        self._ensure_name_free(location.name)

        ValidatorBucket.of().consist_of(ConstraintValidator(location, LockerLocationConstraints)).validate()

        created = self._location_repo.create(location)
        logger.info("Locker location %r created", created.name)
        return LockerLocationSummaryDTO(location=created, enabled_locker_count=0, total_locker_count=0)


class UpdateLockerLocationUseCase(_LocationUseCase):
    def execute(
            self,
            *,
            actor_id: str,
            location_id: str,
            name: str,
            description: str = "",
    ) -> LockerLocationSummaryDTO:
        self._authorize(actor_id)

        current = self._get_location(location_id)
        if current.name != name:
            self._ensure_name_free(name)

        location = LockerLocation(id=current.id, name=name, description=description)
        ValidatorBucket.of().consist_of(ConstraintValidator(location, LockerLocationConstraints)).validate()

        updated = self._location_repo.update(location_id, location)
        if updated is None:
            logger.error("Location store returned nothing when updating location %s", location_id)
            raise InternalError("Locker location id checked, but exception occurred")

        logger.info("Locker location %s renamed %r -> %r", location_id, current.name, updated.name)
        return summarize(updated, self._locker_repo)


class DeleteLockerLocationUseCase(_LocationUseCase):
    def execute(self, *, actor_id: str, location_id: str) -> LockerLocationSummaryDTO:
        self._authorize(actor_id)

        location = self._get_location(location_id)
        if self._locker_repo.count_by_location(location.id) != 0:
            raise ConflictError("Lockers still exist at this location")

        self._location_repo.delete(location)
        logger.info("Locker location %r deleted", location.name)
        return LockerLocationSummaryDTO(location=location, enabled_locker_count=0, total_locker_count=0)
