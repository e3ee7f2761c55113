from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ValidationError

from lockerdesk.core.entities.user import Role, UserState
from lockerdesk.core.errors import (
    ConstraintViolationError,
    ForbiddenError,
    InvalidStateError,
)
from lockerdesk.core.validation.validator import Validator


class UserStateValidator(Validator):
    error_type = InvalidStateError

    def __init__(self, state: UserState) -> None:
        self._state = state

    def is_valid(self) -> bool:
        return self._state is UserState.ACTIVE

    def message(self) -> str:
        return f"User state {self._state.value} is not allowed to perform this operation"


class UserRoleIsNoneValidator(Validator):
    error_type = ForbiddenError

    def __init__(self, role: Role) -> None:
        self._role = role

    def is_valid(self) -> bool:
        return self._role is not Role.NONE

    def message(self) -> str:
        return "User has no role in the organization"


class UserRoleValidator(Validator):
    error_type = ForbiddenError

    def __init__(self, role: Role, allowed: Iterable[Role]) -> None:
        self._role = role
        self._allowed = frozenset(allowed)

    def is_valid(self) -> bool:
        return self._role in self._allowed

    def message(self) -> str:
        allowed = ", ".join(sorted(r.value for r in self._allowed))
        return f"Role {self._role.value} is not allowed; requires one of: {allowed}"


class ConstraintValidator(Validator):
    """
    Structural check of a domain object against a pydantic constraint model.
    The object is read through its attributes, so dataclass entities can be
    validated without being converted first.
    """

    error_type = ConstraintViolationError

    def __init__(self, target: Any, constraints: type[BaseModel]) -> None:
        self._target = target
        self._constraints = constraints
        self._errors: list[str] = []

    def is_valid(self) -> bool:
        try:
            self._constraints.model_validate(self._target, from_attributes=True)
        except ValidationError as e:
            self._errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            ]
            return False
        return True

    def message(self) -> str:
        return "; ".join(self._errors) or "Constraint violation"
