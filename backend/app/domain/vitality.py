"""Module: vitality.

Pure rules for how interactions move a pet's stats and when a pet counts as
dead. Nothing in here touches the database or reads the clock on its own;
callers pass ``now`` explicitly.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

# A pet is dead once it has gone strictly longer than this without interaction.
DEATH_THRESHOLD = timedelta(days=3)

# Zero timestamp a new pet starts with until its first interaction.
NEVER_INTERACTED = datetime.min

# Stat deltas applied per interaction: (happiness, hunger).
PLAYTIME_DELTA = (5, 3)
FEEDING_DELTA = (3, -5)
SCOLDING_DELTA = (-5, 0)


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every datetime column stores."""
    return datetime.now(UTC).replace(tzinfo=None)


def is_dead(last_interacted_with_date: datetime, now: datetime) -> bool:
    """True iff more than three days have passed since the last interaction.

    Exactly three days is still alive.
    """
    return now - last_interacted_with_date > DEATH_THRESHOLD


def is_hungry(hunger_level: int) -> bool:
    # Only an exact zero blocks feeding; negative hunger can still be fed.
    return hunger_level != 0


def apply_delta(pet, delta: tuple[int, int], now: datetime) -> None:
    """Apply an interaction's stat delta and refresh the interaction timestamp."""
    happiness, hunger = delta
    pet.happiness_level += happiness
    pet.hunger_level += hunger
    pet.last_interacted_with_date = now
