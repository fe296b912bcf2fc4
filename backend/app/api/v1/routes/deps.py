"""Module: deps."""

from datetime import datetime
from typing import Callable, Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.domain.vitality import utcnow
from app.services.pet_service import PetService
from app.services.repository import SqlAlchemyPetRepository

# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Clock used for timestamps and liveness; tests override it.
def get_clock() -> Callable[[], datetime]:
    return utcnow


def get_pet_service(
    db: Session = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> PetService:
    return PetService(SqlAlchemyPetRepository(db), clock=clock)
