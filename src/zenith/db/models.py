"""SQLAlchemy ORM models — single source of truth for the database schema.

Learn: Declarative ORM mapping with SQLAlchemy 2.0 style (Mapped[] + mapped_column).
Each class = one table. Relationships, constraints, and indexes defined here.
Alembic migrations mirror these models.

Key concepts:
- Integer auto-increment primary keys (opaque numeric ids in the API)
- Email uniqueness lives in the database (uq_users_email), not only in
  the service — two concurrent registrations can both pass a SELECT check
- server_default for DB-level defaults (work even for raw SQL inserts)
"""

from datetime import date, datetime, time, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Time,
    UniqueConstraint,
    false,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ══════════════════════════════════════════════════════════════
# Accounts + Tasks
# ══════════════════════════════════════════════════════════════


class User(Base):
    """A registered account. Owns many tasks.

    Learn: Only the bcrypt digest is stored. The plaintext password
    never reaches this table.
    """

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    tasks: Mapped[list["Task"]] = relationship(back_populates="user")


class Task(Base):
    """A to-do item belonging to exactly one user.

    Learn: user_id is written once, at creation. Updates go through
    OwnershipGuard.reassert_owner, which pins it to the original value.
    """

    __tablename__ = "tasks"
    __table_args__ = (
        Index("idx_tasks_user", "user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=utcnow,
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship(back_populates="tasks")


# ══════════════════════════════════════════════════════════════
# Travel catalog: plain rows, no business rules
# ══════════════════════════════════════════════════════════════


class Bus(Base):
    __tablename__ = "buses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bus_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    route: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    bus_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


class Hotel(Base):
    __tablename__ = "hotels"
    __table_args__ = (
        Index("idx_hotels_location", "location"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)


class Train(Base):
    __tablename__ = "trains"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    train_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    train_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    source_station: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    destination_station: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    departure_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    arrival_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    travel_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    seats_available: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
