from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from lockerdesk.core.entities.locker_location import LockerLocation
from lockerdesk.core.entities.user import User


@dataclass(frozen=True, slots=True)
class Assigned:
    user: User


@dataclass(frozen=True, slots=True)
class Unassigned:
    pass


Assignment = Assigned | Unassigned

UNASSIGNED = Unassigned()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Locker:
    locker_number: int
    location: LockerLocation
    is_active: bool = True
    assignment: Assignment = UNASSIGNED
    updated_at: datetime | None = None
    id: str | None = None

    @property
    def user(self) -> User | None:
        match self.assignment:
            case Assigned(user=user):
                return user
            case Unassigned():
                return None

    @property
    def in_use(self) -> bool:
        return isinstance(self.assignment, Assigned)

    def assign(self, user: User) -> None:
        if not self.is_active:
            raise ValueError("Cannot assign a disabled locker")
        if self.in_use:
            raise ValueError("Locker is already in use")
        self.assignment = Assigned(user=user)
        self.updated_at = _utcnow()

    def release(self) -> None:
        if not self.in_use:
            raise ValueError("Locker is not assigned to anyone")
        self.assignment = UNASSIGNED
        self.updated_at = _utcnow()

    def enable(self) -> None:
        if self.is_active:
            raise ValueError("Locker is already enabled")
        self.is_active = True
        self.updated_at = _utcnow()

    def disable(self) -> None:
        if self.in_use:
            raise ValueError("Cannot disable a locker in use")
        if not self.is_active:
            raise ValueError("Locker is already disabled")
        self.is_active = False
        self.updated_at = _utcnow()

    def relocated_to(self, location: LockerLocation) -> Locker:
        """
        Copy of this locker attached to `location`. A relocated locker is
        always deactivated and has to be re-enabled explicitly.
        """
        if self.in_use:
            raise ValueError("Cannot move a locker in use")
        return replace(self, location=location, is_active=False, updated_at=_utcnow())
