from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lockerdesk.core.entities.locker_log import LockerLogAction
from lockerdesk.core.entities.user import Role, UserState
from lockerdesk.infrastructure.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[Role] = mapped_column(Enum(Role), nullable=False, default=Role.NONE)
    state: Mapped[UserState] = mapped_column(Enum(UserState), nullable=False, default=UserState.AWAIT)


class LockerLocationModel(Base):
    __tablename__ = "locker_locations"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    lockers = relationship("LockerModel", back_populates="location")


class LockerModel(Base):
    __tablename__ = "lockers"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_uuid)
    locker_number: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    user_id: Mapped[str | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    location_id: Mapped[str] = mapped_column(ForeignKey("locker_locations.id"), nullable=False, index=True)

    user = relationship("UserModel")
    location = relationship("LockerLocationModel", back_populates="lockers")


class LockerLogModel(Base):
    __tablename__ = "locker_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    locker_number: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    actor_id: Mapped[str] = mapped_column(String, nullable=False)
    actor_name: Mapped[str] = mapped_column(String, nullable=False)
    action: Mapped[LockerLogAction] = mapped_column(Enum(LockerLogAction), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
