"""Module: playtime."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.vitality import utcnow

if TYPE_CHECKING:
    from app.db.models.pet import Pet


# Time spent playing with a pet; raises happiness and hunger.
class Playtime(Base):
    __tablename__ = "playtimes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    pet_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    when: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    pet: Mapped["Pet"] = relationship(back_populates="playtimes")
