from __future__ import annotations

from collections.abc import Iterable

from lockerdesk.core.entities.user import Role, User
from lockerdesk.core.errors import NotFoundError
from lockerdesk.core.repositories.user_repository import UserRepository
from lockerdesk.core.validation.validator_bucket import ValidatorBucket
from lockerdesk.core.validation.validators import (
    UserRoleIsNoneValidator,
    UserRoleValidator,
    UserStateValidator,
)

LOCKER_MANAGER_ROLES = (Role.PRESIDENT,)


def resolve_actor(user_repo: UserRepository, actor_id: str) -> User:
    actor = user_repo.find_by_id(actor_id)
    if actor is None:
        raise NotFoundError("Actor not found")
    return actor


def actor_bucket(actor: User, allowed_roles: Iterable[Role] | None = None) -> ValidatorBucket:
    """
    Bucket pre-filled with the actor checks every mutating operation runs:
    account state, then role not NONE, then (optionally) role membership.
    """
    bucket = (
        ValidatorBucket.of()
        .consist_of(UserStateValidator(actor.state))
        .consist_of(UserRoleIsNoneValidator(actor.role))
    )
    if allowed_roles is not None:
        bucket.consist_of(UserRoleValidator(actor.role, allowed_roles))
    return bucket
