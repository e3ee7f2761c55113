from __future__ import annotations

import pytest

from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.entities.locker_location import LockerLocation
from lockerdesk.core.entities.locker_log import LockerLogAction
from lockerdesk.core.entities.user import Role, UserState
from lockerdesk.core.errors import (
    ConflictError,
    ConstraintViolationError,
    ForbiddenError,
    InternalError,
    InvalidStateError,
    NotFoundError,
    UnsupportedActionError,
)
from lockerdesk.core.use_cases.create_locker import CreateLockerUseCase
from lockerdesk.core.use_cases.delete_locker import DeleteLockerUseCase
from lockerdesk.core.use_cases.get_locker import GetLockerUseCase, ListLockersByLocationUseCase
from lockerdesk.core.use_cases.get_locker_log import GetLockerLogUseCase
from lockerdesk.core.use_cases.move_locker import MoveLockerUseCase
from lockerdesk.core.use_cases.update_locker import UpdateLockerUseCase
from lockerdesk.infrastructure.repositories.locker_repository_impl import LockerRepositoryImpl


class _BrokenLockerRepo(LockerRepositoryImpl):
    """Store that accepts every check but fails to write."""

    def create(self, locker: Locker) -> Locker | None:
        return None

    def update(self, locker: Locker) -> Locker | None:
        return None


def _create(repos, locker_repo=None) -> CreateLockerUseCase:
    return CreateLockerUseCase(
        user_repo=repos.users,
        locker_repo=locker_repo or repos.lockers,
        location_repo=repos.locations,
        log_repo=repos.logs,
    )


def _update(repos, locker_repo=None) -> UpdateLockerUseCase:
    return UpdateLockerUseCase(user_repo=repos.users, locker_repo=locker_repo or repos.lockers, log_repo=repos.logs)


def _delete(repos) -> DeleteLockerUseCase:
    return DeleteLockerUseCase(user_repo=repos.users, locker_repo=repos.lockers, log_repo=repos.logs)


def _move(repos, log_moves: bool = True) -> MoveLockerUseCase:
    return MoveLockerUseCase(
        user_repo=repos.users,
        locker_repo=repos.lockers,
        location_repo=repos.locations,
        log_repo=repos.logs,
        log_moves=log_moves,
    )


def _location(repos, name: str = "3F-East") -> LockerLocation:
    return repos.locations.create(LockerLocation(name=name, description=""))


def _actions(repos, locker_number: int) -> list[LockerLogAction]:
    return [log.action for log in repos.logs.find_by_locker_number(locker_number)]


def test_create_locker_starts_active_unassigned_with_enable_log(repos, president) -> None:
    location = _location(repos)

    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    assert locker.id
    assert locker.locker_number == 301
    assert locker.is_active is True
    assert locker.user is None
    assert locker.location.id == location.id

    logs = repos.logs.find_by_locker_number(301)
    assert [log.action for log in logs] == [LockerLogAction.ENABLE]
    assert logs[0].actor_id == president
    assert logs[0].message == "initial creation"


def test_create_duplicate_locker_number_conflicts_without_log(repos, president) -> None:
    location = _location(repos)
    _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    with pytest.raises(ConflictError):
        _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    assert _actions(repos, 301) == [LockerLogAction.ENABLE]


@pytest.mark.parametrize("role", [Role.COMMON, Role.COUNCIL, Role.ADMIN, Role.LEADER_CIRCLE])
def test_create_locker_by_non_president_is_forbidden(repos, make_user, role: Role) -> None:
    location = _location(repos)
    actor = make_user(role=role)

    with pytest.raises(ForbiddenError):
        _create(repos).execute(actor_id=actor, locker_number=301, location_id=location.id)

    assert repos.lockers.count_by_location(location.id) == 0
    assert _actions(repos, 301) == []


def test_forbidden_wins_over_duplicate_number(repos, president, make_user) -> None:
    location = _location(repos)
    _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    with pytest.raises(ForbiddenError):
        _create(repos).execute(actor_id=make_user(role=Role.COMMON), locker_number=301, location_id=location.id)


def test_create_locker_by_inactive_president_reports_state(repos, make_user) -> None:
    location = _location(repos)
    actor = make_user(role=Role.PRESIDENT, state=UserState.INACTIVE)

    with pytest.raises(InvalidStateError):
        _create(repos).execute(actor_id=actor, locker_number=301, location_id=location.id)


def test_create_locker_unknown_actor_or_location(repos, president) -> None:
    location = _location(repos)

    with pytest.raises(NotFoundError, match="Actor"):
        _create(repos).execute(actor_id="nobody", locker_number=1, location_id=location.id)

    with pytest.raises(NotFoundError, match="location"):
        _create(repos).execute(actor_id=president, locker_number=1, location_id="missing")


def test_oversized_locker_number_is_rejected_before_any_lookup(repos, president) -> None:
    location = _location(repos)

    with pytest.raises(ConstraintViolationError, match="locker_number"):
        _create(repos).execute(actor_id=president, locker_number=2**63, location_id=location.id)

    assert repos.lockers.find_by_location_id(location.id) == []


def test_store_failure_after_validation_is_internal_and_writes_no_log(db, repos, president) -> None:
    location = _location(repos)
    broken = _BrokenLockerRepo(db)

    with pytest.raises(InternalError):
        _create(repos, locker_repo=broken).execute(actor_id=president, locker_number=301, location_id=location.id)

    assert _actions(repos, 301) == []


def test_failed_update_writes_no_log(db, repos, president, make_user) -> None:
    location = _location(repos)
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)
    member = make_user()

    with pytest.raises(InternalError):
        _update(repos, locker_repo=_BrokenLockerRepo(db)).execute(
            actor_id=member, locker_id=locker.id, action="GRANT"
        )
    with pytest.raises(UnsupportedActionError):
        _update(repos).execute(actor_id=member, locker_id=locker.id, action="EXTEND")

    assert _actions(repos, 301) == [LockerLogAction.ENABLE]


def test_update_requires_a_role(repos, president, make_user) -> None:
    location = _location(repos)
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    with pytest.raises(ForbiddenError):
        _update(repos).execute(actor_id=make_user(role=Role.NONE), locker_id=locker.id, action="GRANT")
    with pytest.raises(InvalidStateError):
        _update(repos).execute(actor_id=make_user(state=UserState.AWAIT), locker_id=locker.id, action="GRANT")


def test_update_unknown_locker(repos, make_user) -> None:
    with pytest.raises(NotFoundError):
        _update(repos).execute(actor_id=make_user(), locker_id="missing", action="GRANT")


def test_grant_to_unknown_target_user(repos, president) -> None:
    location = _location(repos)
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    with pytest.raises(NotFoundError, match="Target"):
        _update(repos).execute(actor_id=president, locker_id=locker.id, action="GRANT", target_user_id="ghost")


def test_update_writes_log_with_action_and_message(repos, president, make_user) -> None:
    location = _location(repos)
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)
    member = make_user(name="kim")

    granted = _update(repos).execute(actor_id=member, locker_id=locker.id, action="grant", message="semester 1")

    assert granted.user is not None and granted.user.id == member
    last = repos.logs.find_by_locker_number(301)[-1]
    assert last.action is LockerLogAction.GRANT
    assert last.message == "semester 1"
    assert last.actor_name == "kim"


def test_delete_assigned_locker_conflicts(repos, president, make_user) -> None:
    location = _location(repos)
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)
    _update(repos).execute(actor_id=make_user(), locker_id=locker.id, action="GRANT")

    with pytest.raises(ConflictError, match="in use"):
        _delete(repos).execute(actor_id=president, locker_id=locker.id)

    assert repos.lockers.find_by_id(locker.id) is not None
    assert _actions(repos, 301) == [LockerLogAction.ENABLE, LockerLogAction.GRANT]


def test_delete_unassigned_locker_writes_one_disable_log(repos, president) -> None:
    location = _location(repos)
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    deleted = _delete(repos).execute(actor_id=president, locker_id=locker.id)

    assert deleted.id == locker.id
    assert repos.lockers.find_by_id(locker.id) is None
    logs = repos.logs.find_by_locker_number(301)
    assert [log.action for log in logs] == [LockerLogAction.ENABLE, LockerLogAction.DISABLE]
    assert logs[-1].message == "deletion"


def test_locker_lifecycle_scenario(repos, president, make_user) -> None:
    u1 = make_user(name="U1")
    location = _location(repos, "3F-East")
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)

    _update(repos).execute(actor_id=u1, locker_id=locker.id, action="GRANT")

    with pytest.raises(ConflictError):
        _delete(repos).execute(actor_id=president, locker_id=locker.id)

    _update(repos).execute(actor_id=u1, locker_id=locker.id, action="RETURN")
    _delete(repos).execute(actor_id=president, locker_id=locker.id)

    assert _actions(repos, 301) == [
        LockerLogAction.ENABLE,
        LockerLogAction.GRANT,
        LockerLogAction.RETURN,
        LockerLogAction.DISABLE,
    ]


def test_move_deactivates_and_logs(repos, president) -> None:
    a = _location(repos, "A")
    b = _location(repos, "B")
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=a.id)

    moved = _move(repos).execute(actor_id=president, locker_id=locker.id, location_id=b.id)

    assert moved.location.id == b.id
    assert moved.is_active is False
    assert repos.lockers.count_by_location(a.id) == 0
    assert repos.lockers.count_by_location(b.id) == 1
    assert repos.lockers.count_enabled_by_location(b.id) == 0
    logs = repos.logs.find_by_locker_number(301)
    assert [log.action for log in logs] == [LockerLogAction.ENABLE, LockerLogAction.MOVE]
    assert logs[-1].message == "relocated to B"


def test_move_without_move_logging(repos, president) -> None:
    a = _location(repos, "A")
    b = _location(repos, "B")
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=a.id)

    _move(repos, log_moves=False).execute(actor_id=president, locker_id=locker.id, location_id=b.id)

    assert _actions(repos, 301) == [LockerLogAction.ENABLE]


def test_move_assigned_locker_conflicts(repos, president, make_user) -> None:
    a = _location(repos, "A")
    b = _location(repos, "B")
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=a.id)
    _update(repos).execute(actor_id=make_user(), locker_id=locker.id, action="GRANT")

    with pytest.raises(ConflictError):
        _move(repos).execute(actor_id=president, locker_id=locker.id, location_id=b.id)


def test_move_requires_president_and_existing_targets(repos, president, make_user) -> None:
    a = _location(repos, "A")
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=a.id)

    with pytest.raises(ForbiddenError):
        _move(repos).execute(actor_id=make_user(role=Role.COUNCIL), locker_id=locker.id, location_id=a.id)
    with pytest.raises(NotFoundError):
        _move(repos).execute(actor_id=president, locker_id="missing", location_id=a.id)
    with pytest.raises(NotFoundError):
        _move(repos).execute(actor_id=president, locker_id=locker.id, location_id="missing")


def test_moved_locker_must_be_re_enabled_before_grant(repos, president, make_user) -> None:
    a = _location(repos, "A")
    b = _location(repos, "B")
    locker = _create(repos).execute(actor_id=president, locker_number=301, location_id=a.id)
    _move(repos).execute(actor_id=president, locker_id=locker.id, location_id=b.id)
    member = make_user()

    with pytest.raises(ConflictError, match="disabled"):
        _update(repos).execute(actor_id=member, locker_id=locker.id, action="GRANT")

    _update(repos).execute(actor_id=president, locker_id=locker.id, action="ENABLE")
    granted = _update(repos).execute(actor_id=member, locker_id=locker.id, action="GRANT")
    assert granted.user is not None and granted.user.id == member


def test_find_log_only_returns_entries_for_that_locker_in_order(repos, president, make_user) -> None:
    location = _location(repos)
    first = _create(repos).execute(actor_id=president, locker_number=301, location_id=location.id)
    second = _create(repos).execute(actor_id=president, locker_number=302, location_id=location.id)
    member = make_user()

    _update(repos).execute(actor_id=member, locker_id=second.id, action="GRANT")
    _update(repos).execute(actor_id=member, locker_id=first.id, action="GRANT")
    _update(repos).execute(actor_id=member, locker_id=first.id, action="RETURN")

    logs = GetLockerLogUseCase(locker_repo=repos.lockers, log_repo=repos.logs).execute(locker_id=first.id)

    assert {log.locker_number for log in logs} == {301}
    assert [log.action for log in logs] == [LockerLogAction.ENABLE, LockerLogAction.GRANT, LockerLogAction.RETURN]
    assert [log.created_at for log in logs] == sorted(log.created_at for log in logs)


def test_find_log_unknown_locker(repos) -> None:
    with pytest.raises(NotFoundError):
        GetLockerLogUseCase(locker_repo=repos.lockers, log_repo=repos.logs).execute(locker_id="missing")


def test_get_locker_and_list_by_location(repos, president) -> None:
    location = _location(repos)
    other = _location(repos, "other")
    create = _create(repos)
    b = create.execute(actor_id=president, locker_number=302, location_id=location.id)
    a = create.execute(actor_id=president, locker_number=301, location_id=location.id)
    create.execute(actor_id=president, locker_number=900, location_id=other.id)

    assert GetLockerUseCase(locker_repo=repos.lockers).execute(locker_id=a.id).locker_number == 301
    with pytest.raises(NotFoundError):
        GetLockerUseCase(locker_repo=repos.lockers).execute(locker_id="missing")

    listed = ListLockersByLocationUseCase(locker_repo=repos.lockers, location_repo=repos.locations).execute(
        location_id=location.id
    )
    assert [locker.id for locker in listed] == [a.id, b.id]

    with pytest.raises(NotFoundError):
        ListLockersByLocationUseCase(locker_repo=repos.lockers, location_repo=repos.locations).execute(
            location_id="missing"
        )
