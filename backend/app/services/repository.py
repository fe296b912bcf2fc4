"""Module: repository."""

from __future__ import annotations

from typing import Protocol, Sequence, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models import Feeding, Pet, Playtime, Scolding

Interaction = Union[Playtime, Feeding, Scolding]


class PetRepository(Protocol):
    """Storage the pet service works against."""

    def list_pets(self) -> Sequence[Pet]: ...

    def get_pet(self, pet_id: int) -> Pet | None: ...

    def add_pet(self, pet: Pet) -> Pet: ...

    def delete_pet(self, pet: Pet) -> None: ...

    def add_interaction(self, interaction: Interaction) -> Interaction: ...

    def commit(self) -> None: ...


# SQLAlchemy-backed repository bound to one request-scoped session.
class SqlAlchemyPetRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_pets(self) -> Sequence[Pet]:
        return self.session.execute(select(Pet).order_by(Pet.id)).scalars().all()

    def get_pet(self, pet_id: int) -> Pet | None:
        return self.session.get(Pet, pet_id)

    def add_pet(self, pet: Pet) -> Pet:
        self.session.add(pet)
        return pet

    def delete_pet(self, pet: Pet) -> None:
        self.session.delete(pet)

    def add_interaction(self, interaction: Interaction) -> Interaction:
        self.session.add(interaction)
        return interaction

    def commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
