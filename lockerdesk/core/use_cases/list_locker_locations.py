from __future__ import annotations

from dataclasses import dataclass

from lockerdesk.core.entities.locker_location import LockerLocation
from lockerdesk.core.repositories.locker_location_repository import LockerLocationRepository
from lockerdesk.core.repositories.locker_repository import LockerRepository


@dataclass(frozen=True, slots=True)
class LockerLocationSummaryDTO:
    """
    A location with its locker counts, computed on read.
    """
    location: LockerLocation
    enabled_locker_count: int
    total_locker_count: int


def summarize(location: LockerLocation, locker_repo: LockerRepository) -> LockerLocationSummaryDTO:
    return LockerLocationSummaryDTO(
        location=location,
        enabled_locker_count=locker_repo.count_enabled_by_location(location.id),
        total_locker_count=locker_repo.count_by_location(location.id),
    )


class ListLockerLocationsUseCase:
    def __init__(self, *, locker_repo: LockerRepository, location_repo: LockerLocationRepository) -> None:
        self._locker_repo = locker_repo
        self._location_repo = location_repo

    def execute(self) -> list[LockerLocationSummaryDTO]:
        return [summarize(location, self._locker_repo) for location in self._location_repo.find_all()]
