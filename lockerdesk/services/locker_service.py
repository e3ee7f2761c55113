from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.orm import Session

from lockerdesk.core.entities.locker import Locker
from lockerdesk.core.entities.locker_log import LockerLog
from lockerdesk.core.use_cases.create_locker import CreateLockerUseCase
from lockerdesk.core.use_cases.delete_locker import DeleteLockerUseCase
from lockerdesk.core.use_cases.get_locker import GetLockerUseCase, ListLockersByLocationUseCase
from lockerdesk.core.use_cases.get_locker_log import GetLockerLogUseCase
from lockerdesk.core.use_cases.list_locker_locations import (
    ListLockerLocationsUseCase,
    LockerLocationSummaryDTO,
)
from lockerdesk.core.use_cases.manage_locker_location import (
    CreateLockerLocationUseCase,
    DeleteLockerLocationUseCase,
    UpdateLockerLocationUseCase,
)
from lockerdesk.core.use_cases.move_locker import MoveLockerUseCase
from lockerdesk.core.use_cases.update_locker import UpdateLockerUseCase
from lockerdesk.infrastructure.repositories.locker_location_repository_impl import LockerLocationRepositoryImpl
from lockerdesk.infrastructure.repositories.locker_log_repository_impl import LockerLogRepositoryImpl
from lockerdesk.infrastructure.repositories.locker_repository_impl import LockerRepositoryImpl
from lockerdesk.infrastructure.repositories.user_repository_impl import UserRepositoryImpl
from lockerdesk.schemas.models import (
    LockerCreateRequest,
    LockerLocationCreateRequest,
    LockerLocationResponse,
    LockerLocationUpdateRequest,
    LockerLogDetail,
    LockerMoveRequest,
    LockerResponse,
    LockerUpdateRequest,
)

T = TypeVar("T")


def _log_locker_moves() -> bool:
    from lockerdesk.infrastructure.config import settings
    return settings.log_locker_moves


def _in_transaction(db: Session, work: Callable[[], T]) -> T:
    """
    Run one use case as a single unit of work: the mutation and its log entry
    are committed together or not at all.
    """
    try:
        result = work()
        db.commit()
    except Exception:
        db.rollback()
        raise
    return result


def _to_locker_response(locker: Locker) -> LockerResponse:
    user = locker.user
    return LockerResponse(
        id=locker.id,
        locker_number=locker.locker_number,
        is_active=locker.is_active,
        updated_at=locker.updated_at,
        user_id=user.id if user is not None else None,
        user_name=user.name if user is not None else None,
        location_id=locker.location.id,
    )


def _to_location_response(dto: LockerLocationSummaryDTO) -> LockerLocationResponse:
    return LockerLocationResponse(
        id=dto.location.id,
        name=dto.location.name,
        description=dto.location.description,
        enabled_locker_count=dto.enabled_locker_count,
        total_locker_count=dto.total_locker_count,
    )


def _to_log_detail(log: LockerLog) -> LockerLogDetail:
    return LockerLogDetail(
        locker_number=log.locker_number,
        actor_id=log.actor_id,
        actor_name=log.actor_name,
        action=log.action,
        message=log.message,
        created_at=log.created_at,
    )


def get_locker_service(locker_id: str, db: Session) -> LockerResponse:
    use_case = GetLockerUseCase(locker_repo=LockerRepositoryImpl(db))
    return _to_locker_response(use_case.execute(locker_id=locker_id))


def create_locker_service(actor_id: str, body: LockerCreateRequest, db: Session) -> LockerResponse:
    use_case = CreateLockerUseCase(
        user_repo=UserRepositoryImpl(db),
        locker_repo=LockerRepositoryImpl(db),
        location_repo=LockerLocationRepositoryImpl(db),
        log_repo=LockerLogRepositoryImpl(db),
    )
    locker = _in_transaction(
        db,
        lambda: use_case.execute(
            actor_id=actor_id,
            locker_number=body.locker_number,
            location_id=body.location_id,
        ),
    )
    return _to_locker_response(locker)


def update_locker_service(actor_id: str, locker_id: str, body: LockerUpdateRequest, db: Session) -> LockerResponse:
    use_case = UpdateLockerUseCase(
        user_repo=UserRepositoryImpl(db),
        locker_repo=LockerRepositoryImpl(db),
        log_repo=LockerLogRepositoryImpl(db),
    )
    locker = _in_transaction(
        db,
        lambda: use_case.execute(
            actor_id=actor_id,
            locker_id=locker_id,
            action=body.action,
            message=body.message,
            target_user_id=body.user_id,
        ),
    )
    return _to_locker_response(locker)


def move_locker_service(actor_id: str, locker_id: str, body: LockerMoveRequest, db: Session) -> LockerResponse:
    use_case = MoveLockerUseCase(
        user_repo=UserRepositoryImpl(db),
        locker_repo=LockerRepositoryImpl(db),
        location_repo=LockerLocationRepositoryImpl(db),
        log_repo=LockerLogRepositoryImpl(db),
        log_moves=_log_locker_moves(),
    )
    locker = _in_transaction(
        db,
        lambda: use_case.execute(actor_id=actor_id, locker_id=locker_id, location_id=body.location_id),
    )
    return _to_locker_response(locker)


def delete_locker_service(actor_id: str, locker_id: str, db: Session) -> LockerResponse:
    use_case = DeleteLockerUseCase(
        user_repo=UserRepositoryImpl(db),
        locker_repo=LockerRepositoryImpl(db),
        log_repo=LockerLogRepositoryImpl(db),
    )
    locker = _in_transaction(db, lambda: use_case.execute(actor_id=actor_id, locker_id=locker_id))
    return _to_locker_response(locker)


def get_locker_log_service(locker_id: str, db: Session) -> list[LockerLogDetail]:
    use_case = GetLockerLogUseCase(locker_repo=LockerRepositoryImpl(db), log_repo=LockerLogRepositoryImpl(db))
    return [_to_log_detail(log) for log in use_case.execute(locker_id=locker_id)]


def list_lockers_by_location_service(location_id: str, db: Session) -> list[LockerResponse]:
    use_case = ListLockersByLocationUseCase(
        locker_repo=LockerRepositoryImpl(db),
        location_repo=LockerLocationRepositoryImpl(db),
    )
    return [_to_locker_response(locker) for locker in use_case.execute(location_id=location_id)]


def list_locker_locations_service(db: Session) -> list[LockerLocationResponse]:
    use_case = ListLockerLocationsUseCase(
        locker_repo=LockerRepositoryImpl(db),
        location_repo=LockerLocationRepositoryImpl(db),
    )
    return [_to_location_response(dto) for dto in use_case.execute()]


def _location_use_case_kwargs(db: Session) -> dict:
    return {
        "user_repo": UserRepositoryImpl(db),
        "locker_repo": LockerRepositoryImpl(db),
        "location_repo": LockerLocationRepositoryImpl(db),
    }


def create_locker_location_service(
        actor_id: str,
        body: LockerLocationCreateRequest,
        db: Session,
) -> LockerLocationResponse:
    use_case = CreateLockerLocationUseCase(**_location_use_case_kwargs(db))
    dto = _in_transaction(
        db,
        lambda: use_case.execute(actor_id=actor_id, name=body.name, description=body.description),
    )
    return _to_location_response(dto)


def update_locker_location_service(
        actor_id: str,
        location_id: str,
        body: LockerLocationUpdateRequest,
        db: Session,
) -> LockerLocationResponse:
    use_case = UpdateLockerLocationUseCase(**_location_use_case_kwargs(db))
    dto = _in_transaction(
        db,
        lambda: use_case.execute(
            actor_id=actor_id,
            location_id=location_id,
            name=body.name,
            description=body.description,
        ),
    )
    return _to_location_response(dto)


def delete_locker_location_service(actor_id: str, location_id: str, db: Session) -> LockerLocationResponse:
    use_case = DeleteLockerLocationUseCase(**_location_use_case_kwargs(db))
    dto = _in_transaction(db, lambda: use_case.execute(actor_id=actor_id, location_id=location_id))
    return _to_location_response(dto)
