from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class LockerLogAction(str, Enum):
    ENABLE = "ENABLE"
    DISABLE = "DISABLE"
    GRANT = "GRANT"
    RETURN = "RETURN"
    MOVE = "MOVE"


@dataclass(frozen=True, slots=True)
class LockerLog:
    """
    Audit record of one locker state transition. Keyed by locker_number so the
    history outlives the locker row itself.
    """
    locker_number: int
    actor_id: str
    actor_name: str
    action: LockerLogAction
    message: str
    created_at: datetime
