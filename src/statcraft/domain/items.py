"""Equipment archetypes that apply a fixed attribute delta to a holder.

The set of archetypes is closed: every variant is declared here and listed in
:data:`ITEM_TYPES`.  Items carry no mutable state, so one instance may be
applied to any number of holders.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from statcraft.interfaces.holder import IAttributeHolder

from .enums import ItemKind
from .holders import holder_lock
from .stats import AttributeVector

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Item:
    """Base for equipment archetypes.

    Subclasses set ``kind``, ``name`` and ``delta`` as class attributes.
    """

    kind: ClassVar[ItemKind]
    name: ClassVar[str]
    delta: ClassVar[AttributeVector]

    def __post_init__(self) -> None:
        if type(self) is Item:
            raise TypeError("Item is a base class; create an archetype such as Helmet")

    def apply_effect(self, target: IAttributeHolder) -> None:
        """Add :attr:`delta` to the target's current attributes.

        The read-modify-write runs under the holder's lock when it has one.
        Errors raised by ``target.set`` propagate unchanged.
        """

        with holder_lock(target):
            current = target.get()
            updated = self.delta + current
            target.set(updated)
        logger.debug("%s applied %r: %r -> %r", self.name, self.delta, current, updated)


@dataclass(frozen=True, slots=True)
class Helmet(Item):
    kind = ItemKind.HELMET
    name = "Helmet"
    delta = AttributeVector(defense=10)


@dataclass(frozen=True, slots=True)
class ChestPlate(Item):
    kind = ItemKind.CHEST_PLATE
    name = "Chest Plate"
    delta = AttributeVector(defense=15)


@dataclass(frozen=True, slots=True)
class Leggings(Item):
    kind = ItemKind.LEGGINGS
    name = "Leggings"
    delta = AttributeVector(defense=10)


@dataclass(frozen=True, slots=True)
class Sword(Item):
    kind = ItemKind.SWORD
    name = "Sword"
    delta = AttributeVector(attack=15, defense=4)


@dataclass(frozen=True, slots=True)
class BloodBag(Item):
    kind = ItemKind.BLOOD_BAG
    name = "Blood Bag"
    delta = AttributeVector(health=30)


@dataclass(frozen=True, slots=True)
class Wand(Item):
    kind = ItemKind.WAND
    name = "Wand"
    delta = AttributeVector(magic=70)


ITEM_TYPES: Mapping[ItemKind, type[Item]] = MappingProxyType(
    {
        item_type.kind: item_type
        for item_type in (Helmet, ChestPlate, Leggings, Sword, BloodBag, Wand)
    }
)
