"""Module: seed_data."""

from faker import Faker
import random
from datetime import timedelta

from app.db.init_db import init_db
from app.db.session import SessionLocal
from app.domain.vitality import is_hungry, utcnow
from app.services.pet_service import PetService
from app.services.repository import SqlAlchemyPetRepository

fake = Faker()

INTERACTIONS = ["playtime", "feeding", "scolding"]


def _clock_at(moment):
    return lambda: moment


def seed_pets(session, n: int = 12) -> list[int]:
    # Pets are created through the service so seeded rows follow the same rules.
    service = PetService(SqlAlchemyPetRepository(session))
    return [service.create_pet(fake.first_name()).id for _ in range(n)]


def seed_interactions(session, pet_ids: list[int], max_per_pet: int = 6) -> int:
    # Back-date each pet's history by 0-6 days so some pets come out dead.
    now = utcnow()
    count = 0
    for pet_id in pet_ids:
        last_seen = now - timedelta(days=random.randint(0, 6), hours=random.randint(0, 23))
        service = PetService(SqlAlchemyPetRepository(session), clock=_clock_at(last_seen))

        for _ in range(random.randint(0, max_per_pet)):
            kind = random.choice(INTERACTIONS)
            if kind == "feeding" and not is_hungry(service.get_pet(pet_id).hunger_level):
                kind = "playtime"
            getattr(service, f"record_{kind}")(pet_id)
            count += 1
    return count


if __name__ == "__main__":
    # python -m app.scripts.seed_data
    init_db()
    session = SessionLocal()
    try:
        print("Seeding pets (12)...")
        pet_ids = seed_pets(session)

        print("Seeding playtimes, feedings and scoldings...")
        interaction_n = seed_interactions(session, pet_ids)

        print(f"Done. pets={len(pet_ids)}, interactions={interaction_n}")
    finally:
        session.close()
