"""Module: pet schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Body for POST /pets. Server-owned fields sent by clients are ignored.
class PetCreatePayload(CamelModel):
    name: str


class PetRead(CamelModel):
    id: int
    name: str | None = None
    birthday: datetime
    hunger_level: int
    happiness_level: int
    last_interacted_with_date: datetime
    is_dead: bool

    @classmethod
    def from_pet(cls, pet, is_dead: bool) -> "PetRead":
        return cls(
            id=pet.id,
            name=pet.name,
            birthday=pet.birthday,
            hunger_level=pet.hunger_level,
            happiness_level=pet.happiness_level,
            last_interacted_with_date=pet.last_interacted_with_date,
            is_dead=is_dead,
        )


# Shared shape of playtime, feeding and scolding log entries.
class InteractionRead(CamelModel):
    id: int
    pet_id: int
    when: datetime
