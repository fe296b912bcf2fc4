from datetime import datetime, timedelta
from types import SimpleNamespace

from app.domain.vitality import (
    DEATH_THRESHOLD,
    FEEDING_DELTA,
    NEVER_INTERACTED,
    PLAYTIME_DELTA,
    SCOLDING_DELTA,
    apply_delta,
    is_dead,
    is_hungry,
)

NOW = datetime(2024, 5, 1, 12, 0, 0)


def test_alive_right_after_interaction():
    assert is_dead(NOW, NOW) is False


def test_exactly_three_days_is_still_alive():
    assert DEATH_THRESHOLD == timedelta(days=3)
    assert is_dead(NOW - timedelta(days=3), NOW) is False


def test_just_past_three_days_is_dead():
    assert is_dead(NOW - timedelta(days=3, microseconds=1), NOW) is True
    assert is_dead(NOW - timedelta(days=3, seconds=1), NOW) is True


def test_never_interacted_pet_counts_as_dead():
    assert is_dead(NEVER_INTERACTED, NOW) is True


def test_only_zero_hunger_blocks_feeding():
    assert is_hungry(0) is False
    assert is_hungry(3) is True
    assert is_hungry(-2) is True


def test_apply_delta_moves_stats_and_timestamp():
    pet = SimpleNamespace(happiness_level=0, hunger_level=0, last_interacted_with_date=NEVER_INTERACTED)

    apply_delta(pet, PLAYTIME_DELTA, NOW)
    assert (pet.happiness_level, pet.hunger_level) == (5, 3)
    assert pet.last_interacted_with_date == NOW

    apply_delta(pet, FEEDING_DELTA, NOW)
    assert (pet.happiness_level, pet.hunger_level) == (8, -2)

    apply_delta(pet, SCOLDING_DELTA, NOW)
    assert (pet.happiness_level, pet.hunger_level) == (3, -2)


def test_stats_are_not_clamped():
    pet = SimpleNamespace(happiness_level=0, hunger_level=0, last_interacted_with_date=NOW)
    for _ in range(3):
        apply_delta(pet, SCOLDING_DELTA, NOW)
    assert pet.happiness_level == -15
