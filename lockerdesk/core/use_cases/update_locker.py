from __future__ import annotations

import logging

from lockerdesk.core.actions.locker_action import (
    LockerActionContext,
    get_locker_action,
    parse_action_code,
)
from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.errors import InternalError, NotFoundError
from lockerdesk.core.repositories.locker_log_repository import LockerLogRepository
from lockerdesk.core.repositories.locker_repository import LockerRepository
from lockerdesk.core.repositories.user_repository import UserRepository
from lockerdesk.core.use_cases.actor import actor_bucket, resolve_actor

logger = logging.getLogger(__name__)


class UpdateLockerUseCase:
    """
    Applies a locker action (GRANT / RETURN / ENABLE / DISABLE) and records it.

    Any member with a role may call this; what each role may do is decided by
    the action itself.
    """

    def __init__(
            self,
            *,
            user_repo: UserRepository,
            locker_repo: LockerRepository,
            log_repo: LockerLogRepository,
    ) -> None:
        self._user_repo = user_repo
        self._locker_repo = locker_repo
        self._log_repo = log_repo

    def execute(
            self,
            *,
            actor_id: str,
            locker_id: str,
            action: str,
            message: str = "",
            target_user_id: str | None = None,
    ) -> Locker:
        actor = resolve_actor(self._user_repo, actor_id)
        actor_bucket(actor).validate()

        code = parse_action_code(action)
        locker_action = get_locker_action(code)

        locker = self._locker_repo.find_by_id(locker_id)
        if locker is None:
            raise NotFoundError("Locker not found")

        target = None
        if target_user_id is not None:
            target = self._user_repo.find_by_id(target_user_id)
            if target is None:
                raise NotFoundError("Target user not found")

        ctx = LockerActionContext(locker=locker, assignee=locker.user, actor=actor, target=target)
        updated = locker_action.apply(ctx, self._locker_repo)
        if updated is None:
            logger.error("Locker store returned nothing after %s on locker %s", code.value, locker_id)
            raise InternalError("Locker id checked, but exception occurred")

        self._log_repo.create(updated.locker_number, actor, code, message)
        logger.info("Locker #%s %s by %s", updated.locker_number, code.value, actor.id)
        return updated
