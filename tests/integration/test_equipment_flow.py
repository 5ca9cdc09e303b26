"""Integration tests for items and professions driven against shared holders.

Tests cover complete flows: equipping a character step by step, interpreting
the result per profession, and applying items from several threads to one
holder.
"""

from concurrent.futures import ThreadPoolExecutor

from statcraft.config import Settings
from statcraft.domain.holders import StatHolder, SynchronizedStatHolder, create_holder
from statcraft.domain.items import BloodBag, ChestPlate, Helmet, Sword, Wand
from statcraft.domain.stats import ZERO, AttributeVector
from statcraft.factory import all_professions, create_item, create_profession


def test_equipping_armour_then_healing():
    holder = StatHolder()

    Helmet().apply_effect(holder)
    assert holder.get() == AttributeVector(0, 0, 10, 0)

    ChestPlate().apply_effect(holder)
    assert holder.get() == AttributeVector(0, 0, 25, 0)

    BloodBag().apply_effect(holder)
    assert holder.get() == AttributeVector(30, 0, 25, 0)


def test_character_seeded_from_profession_base_stats():
    knight = create_profession("knight")
    holder = create_holder(knight.base_stats, settings=Settings(synchronized_holders=False))

    for kind in ("helmet", "sword"):
        create_item(kind).apply_effect(holder)

    assert holder.get() == AttributeVector(health=100, attack=55, defense=44, magic=0)
    assert knight.attack_points(holder) == 55
    assert knight.defense_points(holder) == 44


def test_same_holder_read_by_every_profession():
    holder = StatHolder()
    Sword().apply_effect(holder)
    Wand().apply_effect(holder)

    scores = {p.kind: (p.attack_points(holder), p.defense_points(holder)) for p in all_professions()}
    assert scores == {
        "warrior": (15, 4),
        "sorcerer": (70, 4),
        "knight": (15, 4),
    }


def test_concurrent_items_lose_no_update():
    holder = SynchronizedStatHolder()
    items = [Sword(), BloodBag()] * 500

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda item: item.apply_effect(holder), items))

    assert holder.get() == AttributeVector(health=30 * 500, attack=15 * 500, defense=4 * 500, magic=0)


def test_removing_an_item_is_the_callers_subtraction():
    holder = StatHolder()
    sword = Sword()
    sword.apply_effect(holder)
    holder.set(holder.get() - sword.delta)
    assert holder.get() == ZERO
