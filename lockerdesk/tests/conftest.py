from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

import pytest
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from lockerdesk.core.entities.user import Role, UserState
from lockerdesk.infrastructure.database import Base, SessionLocal, engine
from lockerdesk.infrastructure.models.models import UserModel
from lockerdesk.infrastructure.repositories.locker_location_repository_impl import LockerLocationRepositoryImpl
from lockerdesk.infrastructure.repositories.locker_log_repository_impl import LockerLogRepositoryImpl
from lockerdesk.infrastructure.repositories.locker_repository_impl import LockerRepositoryImpl
from lockerdesk.infrastructure.repositories.user_repository_impl import UserRepositoryImpl
from lockerdesk.main import app


@pytest.fixture(autouse=True)
def _fresh_schema() -> None:
    """
    Ensure tests don't leak lockers, locations or log entries into each other.
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def db(_fresh_schema) -> Session:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture()
def make_user(db: Session):
    def _make_user(role: Role = Role.COMMON, state: UserState = UserState.ACTIVE, name: str | None = None) -> str:
        row = UserModel(id=str(uuid4()), name=name or f"user-{uuid4().hex[:8]}", role=role, state=state)
        db.add(row)
        db.commit()
        return row.id

    return _make_user


@pytest.fixture()
def president(make_user) -> str:
    return make_user(role=Role.PRESIDENT, name="president")


@dataclass
class Repos:
    users: UserRepositoryImpl
    lockers: LockerRepositoryImpl
    locations: LockerLocationRepositoryImpl
    logs: LockerLogRepositoryImpl


@pytest.fixture()
def repos(db: Session) -> Repos:
    return Repos(
        users=UserRepositoryImpl(db),
        lockers=LockerRepositoryImpl(db),
        locations=LockerLocationRepositoryImpl(db),
        logs=LockerLogRepositoryImpl(db),
    )
