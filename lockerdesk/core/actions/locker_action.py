from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.entities.locker_log import LockerLogAction
from lockerdesk.core.entities.user import Role, User, UserState
from lockerdesk.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    UnsupportedActionError,
)
from lockerdesk.core.repositories.locker_repository import LockerRepository
from lockerdesk.core.validation.constraints import LockerConstraints
from lockerdesk.core.validation.validator_bucket import ValidatorBucket
from lockerdesk.core.validation.validators import ConstraintValidator

OVERRIDE_ROLES = frozenset({Role.ADMIN, Role.PRESIDENT})


@dataclass(frozen=True, slots=True)
class LockerActionContext:
    """
    Inputs shared by every locker action.

    `assignee` is the current holder (None when unassigned) and `target` the
    user a GRANT should go to; it defaults to the actor.
    """
    locker: Locker
    assignee: User | None
    actor: User
    target: User | None = None


class LockerAction(ABC):
    """
    One locker state transition. `apply` checks preconditions, mutates the
    locker, validates it structurally and persists it through the repository.
    Returns the stored locker, or None if the store could not persist it.
    """

    code: LockerLogAction

    def apply(self, ctx: LockerActionContext, locker_repo: LockerRepository) -> Locker | None:
        self._transition(ctx)

        ValidatorBucket.of().consist_of(ConstraintValidator(ctx.locker, LockerConstraints)).validate()

        return locker_repo.update(ctx.locker)

    @abstractmethod
    def _transition(self, ctx: LockerActionContext) -> None:
        raise NotImplementedError

    @staticmethod
    def _mutate(fn: Callable[..., None], *args: object) -> None:
        try:
            fn(*args)
        except ValueError as e:
            raise ConflictError(str(e)) from e

    @staticmethod
    def _require_override(actor: User, what: str) -> None:
        if actor.role not in OVERRIDE_ROLES:
            raise ForbiddenError(f"Role {actor.role.value} cannot {what}")


class GrantLockerAction(LockerAction):
    code = LockerLogAction.GRANT

    def _transition(self, ctx: LockerActionContext) -> None:
        target = ctx.target or ctx.actor
        if target.id != ctx.actor.id:
            self._require_override(ctx.actor, "grant a locker to another user")
            if target.state is not UserState.ACTIVE:
                raise InvalidStateError(f"User {target.id} is not active")
            if target.role is Role.NONE:
                raise ForbiddenError(f"User {target.id} has no role in the organization")

        self._mutate(ctx.locker.assign, target)


class ReturnLockerAction(LockerAction):
    code = LockerLogAction.RETURN

    def _transition(self, ctx: LockerActionContext) -> None:
        if ctx.assignee is None:
            raise ConflictError("Locker is not assigned to anyone")
        if ctx.assignee.id != ctx.actor.id:
            self._require_override(ctx.actor, "return a locker held by another user")

        self._mutate(ctx.locker.release)


class EnableLockerAction(LockerAction):
    code = LockerLogAction.ENABLE

    def _transition(self, ctx: LockerActionContext) -> None:
        self._require_override(ctx.actor, "enable a locker")
        self._mutate(ctx.locker.enable)


class DisableLockerAction(LockerAction):
    code = LockerLogAction.DISABLE

    def _transition(self, ctx: LockerActionContext) -> None:
        self._require_override(ctx.actor, "disable a locker")
        self._mutate(ctx.locker.disable)


def parse_action_code(raw: str) -> LockerLogAction:
    """Turn a request action code into an enum member, rejecting unknown codes."""
    try:
        return LockerLogAction(raw.strip().upper())
    except ValueError:
        raise UnsupportedActionError(f"Unsupported locker action: {raw!r}") from None


def get_locker_action(code: LockerLogAction) -> LockerAction:
    match code:
        case LockerLogAction.GRANT:
            return GrantLockerAction()
        case LockerLogAction.RETURN:
            return ReturnLockerAction()
        case LockerLogAction.ENABLE:
            return EnableLockerAction()
        case LockerLogAction.DISABLE:
            return DisableLockerAction()
        case LockerLogAction.MOVE:
            raise UnsupportedActionError("MOVE is not an update action; use the move operation")
