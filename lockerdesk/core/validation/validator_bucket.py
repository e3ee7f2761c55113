from __future__ import annotations

from lockerdesk.core.validation.validator import Validator


class ValidatorBucket:
    """
    Ordered collection of validators. Nothing is checked until `validate()`;
    validators then run in the order they were added and the first failure is
    raised, so insertion order decides which violation is reported.
    """

    def __init__(self) -> None:
        self._validators: list[Validator] = []

    @classmethod
    def of(cls) -> ValidatorBucket:
        return cls()

    def consist_of(self, validator: Validator) -> ValidatorBucket:
        self._validators.append(validator)
        return self

    def validate(self) -> None:
        for validator in self._validators:
            validator.validate()

    def __len__(self) -> int:
        return len(self._validators)
