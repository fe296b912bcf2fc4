"""Module: errors."""


class PetError(Exception):
    """Base class for pet domain failures surfaced to API callers."""


class PetNotFoundError(PetError):
    def __init__(self, pet_id: int):
        self.pet_id = pet_id
        super().__init__(f"Pet {pet_id} not found")


class PetNotHungryError(PetError):
    def __init__(self, pet):
        self.pet_id = pet.id
        super().__init__(f"{pet.name} isn't hungry!")
