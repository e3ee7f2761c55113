from __future__ import annotations

from abc import ABC, abstractmethod

from lockerdesk.core.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    def find_by_id(self, user_id: str) -> User | None:
        raise NotImplementedError
