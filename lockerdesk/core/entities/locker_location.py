from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class LockerLocation:
    name: str
    description: str = ""
    id: str | None = None
