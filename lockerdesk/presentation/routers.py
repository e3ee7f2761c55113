from __future__ import annotations

from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from lockerdesk.infrastructure.database import SessionLocal
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
from lockerdesk.services.locker_service import (
    create_locker_location_service,
    create_locker_service,
    delete_locker_location_service,
    delete_locker_service,
    get_locker_log_service,
    get_locker_service,
    list_locker_locations_service,
    list_lockers_by_location_service,
    move_locker_service,
    update_locker_location_service,
    update_locker_service,
)

router = APIRouter()


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_actor_id(x_actor_id: str = Header(...)) -> str:
    """
    Identity of the caller, set by the authentication layer in front of this service.
    """
    return x_actor_id


@router.get("/lockers/{locker_id}", response_model=LockerResponse)
def get_locker(locker_id: str, db: Session = Depends(get_db)) -> LockerResponse:
    return get_locker_service(locker_id, db)


@router.post("/lockers", response_model=LockerResponse, status_code=201)
def create_locker(
    body: LockerCreateRequest,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
) -> LockerResponse:
    return create_locker_service(actor_id, body, db)


@router.put("/lockers/{locker_id}", response_model=LockerResponse)
def update_locker(
    locker_id: str,
    body: LockerUpdateRequest,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
) -> LockerResponse:
    """
    Apply a locker action (GRANT, RETURN, ENABLE, DISABLE)
    """
    return update_locker_service(actor_id, locker_id, body, db)


@router.put("/lockers/{locker_id}/move", response_model=LockerResponse)
def move_locker(
    locker_id: str,
    body: LockerMoveRequest,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
) -> LockerResponse:
    return move_locker_service(actor_id, locker_id, body, db)


@router.delete("/lockers/{locker_id}", response_model=LockerResponse)
def delete_locker(
    locker_id: str,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
) -> LockerResponse:
    return delete_locker_service(actor_id, locker_id, db)


@router.get("/lockers/{locker_id}/logs", response_model=list[LockerLogDetail])
def get_locker_logs(locker_id: str, db: Session = Depends(get_db)) -> list[LockerLogDetail]:
    return get_locker_log_service(locker_id, db)


@router.get("/locker-locations", response_model=list[LockerLocationResponse])
def list_locker_locations(db: Session = Depends(get_db)) -> list[LockerLocationResponse]:
    return list_locker_locations_service(db)


@router.get("/locker-locations/{location_id}/lockers", response_model=list[LockerResponse])
def list_lockers_by_location(location_id: str, db: Session = Depends(get_db)) -> list[LockerResponse]:
    return list_lockers_by_location_service(location_id, db)


@router.post("/locker-locations", response_model=LockerLocationResponse, status_code=201)
def create_locker_location(
    body: LockerLocationCreateRequest,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
) -> LockerLocationResponse:
    return create_locker_location_service(actor_id, body, db)


@router.put("/locker-locations/{location_id}", response_model=LockerLocationResponse)
def update_locker_location(
    location_id: str,
    body: LockerLocationUpdateRequest,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
) -> LockerLocationResponse:
    return update_locker_location_service(actor_id, location_id, body, db)


@router.delete("/locker-locations/{location_id}", response_model=LockerLocationResponse)
def delete_locker_location(
    location_id: str,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
) -> LockerLocationResponse:
    return delete_locker_location_service(actor_id, location_id, db)
