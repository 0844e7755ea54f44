"""
Aviary Backend — Bird SQLAlchemy Model
========================================

What:  ORM model representing the `birds` table.
Why:   Maps Python objects to database rows for the store the birds route reads.
Who:   Read by BirdService, written by the seeding step, tracked by Alembic.

Table Design:
    - Integer autoincrement primary key: ids are assigned in insertion order,
      which is also the order GET /birds returns
    - name / species: nullable strings, present by convention only
    - created_at / updated_at: UTC, timezone-aware
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import TIMESTAMP, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    # Stored at millisecond precision, the precision timestamps are rendered at
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def _same_as_created_at(context) -> datetime:
    # A new row starts with updated_at equal to created_at
    return context.get_current_parameters().get("created_at") or _utcnow()


class Bird(Base):
    """
    A single bird record.

    Lifecycle:
        Created by seeding at process start, then only ever read.
        updated_at is bumped by the ORM on update, but no update path exists.
    """

    __tablename__ = "birds"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Common name, e.g. Black-Capped Chickadee",
    )

    species: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Binomial name, e.g. Poecile Atricapillus",
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this bird was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_same_as_created_at,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this bird was last modified (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Bird(id={self.id}, name='{self.name}', species='{self.species}')>"
