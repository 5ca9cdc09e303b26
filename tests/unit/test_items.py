"""Unit tests for equipment archetypes."""

from __future__ import annotations

import pytest

from statcraft.domain.enums import ItemKind
from statcraft.domain.holders import StatHolder, SynchronizedStatHolder
from statcraft.domain.items import (
    ITEM_TYPES,
    BloodBag,
    ChestPlate,
    Helmet,
    Item,
    Leggings,
    Sword,
    Wand,
)
from statcraft.domain.stats import ZERO, AttributeVector


class FakeCharacter:
    """Holder implemented the way a collaborator would, without our helpers."""

    def __init__(self, stats: AttributeVector = ZERO) -> None:
        self.stats = stats
        self.writes = 0

    def get(self) -> AttributeVector:
        return self.stats

    def set(self, vector: AttributeVector) -> None:
        self.writes += 1
        self.stats = vector


class ReadOnlyCharacter(FakeCharacter):
    def set(self, vector: AttributeVector) -> None:
        raise PermissionError("character sheet is locked")


@pytest.mark.parametrize(
    ("item", "delta"),
    [
        (Helmet(), AttributeVector(0, 0, 10, 0)),
        (ChestPlate(), AttributeVector(0, 0, 15, 0)),
        (Leggings(), AttributeVector(0, 0, 10, 0)),
        (Sword(), AttributeVector(0, 15, 4, 0)),
        (BloodBag(), AttributeVector(30, 0, 0, 0)),
        (Wand(), AttributeVector(0, 0, 0, 70)),
    ],
)
def test_item_deltas(item, delta):
    assert item.delta == delta
    holder = StatHolder()
    item.apply_effect(holder)
    assert holder.get() == delta


def test_sword_applied_twice_doubles_effect():
    holder = StatHolder()
    sword = Sword()
    sword.apply_effect(holder)
    sword.apply_effect(holder)
    assert holder.get() == AttributeVector(health=0, attack=30, defense=8, magic=0)


def test_apply_adds_to_current_value():
    holder = StatHolder(AttributeVector(5, -20, 1, 2))
    Sword().apply_effect(holder)
    assert holder.get() == AttributeVector(5, -5, 5, 2)


def test_apply_works_on_any_holder():
    character = FakeCharacter(AttributeVector(health=1))
    BloodBag().apply_effect(character)
    assert character.stats == AttributeVector(health=31)
    assert character.writes == 1


def test_apply_works_on_synchronized_holder():
    holder = SynchronizedStatHolder()
    Wand().apply_effect(holder)
    assert holder.get().magic == 70


def test_set_errors_propagate():
    character = ReadOnlyCharacter()
    with pytest.raises(PermissionError, match="locked"):
        Helmet().apply_effect(character)
    assert character.stats == ZERO


def test_apply_returns_nothing():
    assert Helmet().apply_effect(StatHolder()) is None


def test_items_are_stateless():
    helmet = Helmet()
    first, second = StatHolder(), StatHolder(AttributeVector(health=9))
    helmet.apply_effect(first)
    helmet.apply_effect(second)
    assert first.get() == AttributeVector(defense=10)
    assert second.get() == AttributeVector(health=9, defense=10)
    assert helmet == Helmet()


def test_items_with_same_delta_are_distinct():
    assert Helmet().delta == Leggings().delta
    assert Helmet() != Leggings()


def test_item_types_cover_every_kind():
    assert set(ITEM_TYPES) == set(ItemKind)
    for kind, item_type in ITEM_TYPES.items():
        assert item_type.kind == kind
        assert item_type().name


def test_base_item_cannot_be_created():
    with pytest.raises(TypeError, match="base class"):
        Item()


def test_apply_on_holder_with_unrelated_lock_method():
    class SafeCharacter(FakeCharacter):
        def lock(self) -> None:
            raise AssertionError("unrelated lock must not be used")

    character = SafeCharacter()
    Helmet().apply_effect(character)
    assert character.stats == AttributeVector(defense=10)
