"""Module: pet."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.vitality import NEVER_INTERACTED, utcnow

if TYPE_CHECKING:
    from app.db.models.feeding import Feeding
    from app.db.models.playtime import Playtime
    from app.db.models.scolding import Scolding


# Virtual pet whose stats are nudged by every playtime, feeding and scolding.
class Pet(Base):
    __tablename__ = "pets"

    # Primary Key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str | None] = mapped_column(String, nullable=True)
    birthday: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    # Stats are unbounded in both directions.
    hunger_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    happiness_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    last_interacted_with_date: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=NEVER_INTERACTED,
    )

    # Interaction logs go away with their pet.
    playtimes: Mapped[list["Playtime"]] = relationship(
        back_populates="pet", cascade="all, delete-orphan", passive_deletes=True
    )
    feedings: Mapped[list["Feeding"]] = relationship(
        back_populates="pet", cascade="all, delete-orphan", passive_deletes=True
    )
    scoldings: Mapped[list["Scolding"]] = relationship(
        back_populates="pet", cascade="all, delete-orphan", passive_deletes=True
    )
