from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    PRESIDENT = "PRESIDENT"
    COUNCIL = "COUNCIL"
    LEADER_CIRCLE = "LEADER_CIRCLE"
    PROFESSOR = "PROFESSOR"
    COMMON = "COMMON"
    NONE = "NONE"


class UserState(str, Enum):
    AWAIT = "AWAIT"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    REJECT = "REJECT"
    DROP = "DROP"


@dataclass(frozen=True, slots=True)
class User:
    """
    Read-only view of a club member as seen by the locker workflow.
    """
    id: str
    name: str
    role: Role
    state: UserState
