from __future__ import annotations

from sqlalchemy.orm import Session

from lockerdesk.core.entities.user import User
from lockerdesk.core.repositories.user_repository import UserRepository
from lockerdesk.infrastructure.models.models import UserModel
from lockerdesk.infrastructure.repositories.mappers import to_user


class UserRepositoryImpl(UserRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, user_id: str) -> User | None:
        row = self._db.get(UserModel, user_id)
        if row is None:
            return None
        return to_user(row)
