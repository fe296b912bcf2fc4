"""Module: pet_service."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Sequence

from app.db.models import Feeding, Pet, Playtime, Scolding
from app.domain.vitality import (
    FEEDING_DELTA,
    NEVER_INTERACTED,
    PLAYTIME_DELTA,
    SCOLDING_DELTA,
    apply_delta,
    is_dead,
    is_hungry,
    utcnow,
)
from app.services.errors import PetNotFoundError, PetNotHungryError
from app.services.repository import PetRepository

logger = logging.getLogger(__name__)

ALIVE_FILTER = "alive"


class PetService:
    """Pet lifecycle and interactions on top of a PetRepository.

    Every mutating call ends in exactly one ``commit`` so a stat change and its
    interaction log row are persisted together.
    """

    def __init__(self, repository: PetRepository, clock: Callable[[], datetime] = utcnow):
        self.repository = repository
        self.clock = clock

    def list_pets(self, input_filter: str | None = None) -> Sequence[Pet]:
        pets = self.repository.list_pets()
        if input_filter == ALIVE_FILTER:
            now = self.clock()
            return [pet for pet in pets if not is_dead(pet.last_interacted_with_date, now)]
        return pets

    def get_pet(self, pet_id: int) -> Pet:
        pet = self.repository.get_pet(pet_id)
        if pet is None:
            logger.info("Pet %s not found", pet_id)
            raise PetNotFoundError(pet_id)
        return pet

    def create_pet(self, name: str) -> Pet:
        # Birthday and stats are server-owned; last interaction starts at the zero timestamp.
        pet = Pet(
            name=name,
            birthday=self.clock(),
            hunger_level=0,
            happiness_level=0,
            last_interacted_with_date=NEVER_INTERACTED,
        )
        self.repository.add_pet(pet)
        self.repository.commit()
        logger.info("Created pet %s (%s)", pet.id, pet.name)
        return pet

    def delete_pet(self, pet_id: int) -> Pet:
        pet = self.get_pet(pet_id)
        self.repository.delete_pet(pet)
        self.repository.commit()
        logger.info("Deleted pet %s (%s)", pet_id, pet.name)
        return pet

    def record_playtime(self, pet_id: int) -> Playtime:
        pet = self.get_pet(pet_id)
        now = self.clock()
        playtime = self.repository.add_interaction(Playtime(pet_id=pet.id, when=now))
        apply_delta(pet, PLAYTIME_DELTA, now)
        self.repository.commit()
        logger.info("Pet %s played: hunger=%s happiness=%s", pet.id, pet.hunger_level, pet.happiness_level)
        return playtime

    def record_feeding(self, pet_id: int) -> Feeding:
        pet = self.get_pet(pet_id)
        if not is_hungry(pet.hunger_level):
            logger.warning("Rejected feeding for pet %s: not hungry", pet.id)
            raise PetNotHungryError(pet)

        now = self.clock()
        feeding = self.repository.add_interaction(Feeding(pet_id=pet.id, when=now))
        apply_delta(pet, FEEDING_DELTA, now)
        self.repository.commit()
        logger.info("Pet %s fed: hunger=%s happiness=%s", pet.id, pet.hunger_level, pet.happiness_level)
        return feeding

    def record_scolding(self, pet_id: int) -> Scolding:
        pet = self.get_pet(pet_id)
        now = self.clock()
        scolding = self.repository.add_interaction(Scolding(pet_id=pet.id, when=now))
        apply_delta(pet, SCOLDING_DELTA, now)
        self.repository.commit()
        logger.info("Pet %s scolded: happiness=%s", pet.id, pet.happiness_level)
        return scolding

    def is_dead(self, pet: Pet) -> bool:
        return is_dead(pet.last_interacted_with_date, self.clock())
