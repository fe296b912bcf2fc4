"""Module: base."""

from sqlalchemy.orm import DeclarativeBase

# Shared SQLAlchemy declarative base that pets and interaction logs inherit from.
class Base(DeclarativeBase):
    pass
