from __future__ import annotations

from abc import ABC, abstractmethod

from lockerdesk.core.errors import LockerDeskError


class Validator(ABC):
    """
    A single pass/fail check. Subclasses declare the error type they raise so
    the caller sees which rule was violated.
    """

    error_type: type[LockerDeskError] = LockerDeskError

    @abstractmethod
    def is_valid(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def message(self) -> str:
        raise NotImplementedError

    def validate(self) -> None:
        if not self.is_valid():
            raise self.error_type(self.message())
