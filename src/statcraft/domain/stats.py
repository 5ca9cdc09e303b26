"""Attribute vector value type and its field-wise arithmetic.

An :class:`AttributeVector` is used both as an absolute character state and as
a delta (item bonuses, penalties).  Nothing here bounds the fields: negative
values are meaningful as deltas and any clamping is left to callers.

Examples:
    >>> helmet = AttributeVector(defense=10)
    >>> sword = AttributeVector(attack=15, defense=4)
    >>> helmet + sword
    AttributeVector(health=0, attack=15, defense=14, magic=0)
    >>> print(helmet, end="")
    State: [health: 0, attack: 0, defense: 10, magic: 0]
"""

from __future__ import annotations

from dataclasses import astuple, dataclass

from .enums import StatField


@dataclass(frozen=True, slots=True)
class AttributeVector:
    """Four signed integer attributes compared by value."""

    health: int = 0
    attack: int = 0
    defense: int = 0
    magic: int = 0

    def __add__(self, other: AttributeVector) -> AttributeVector:
        if not isinstance(other, AttributeVector):
            return NotImplemented
        return AttributeVector(
            health=self.health + other.health,
            attack=self.attack + other.attack,
            defense=self.defense + other.defense,
            magic=self.magic + other.magic,
        )

    def __sub__(self, other: AttributeVector) -> AttributeVector:
        if not isinstance(other, AttributeVector):
            return NotImplemented
        return AttributeVector(
            health=self.health - other.health,
            attack=self.attack - other.attack,
            defense=self.defense - other.defense,
            magic=self.magic - other.magic,
        )

    # The vector is immutable, so ``a += b`` rebinds ``a`` to a new value.
    def __iadd__(self, other: AttributeVector) -> AttributeVector:
        return self.__add__(other)

    def __isub__(self, other: AttributeVector) -> AttributeVector:
        return self.__sub__(other)

    def __str__(self) -> str:
        return (
            f"State: [health: {self.health}, attack: {self.attack}, "
            f"defense: {self.defense}, magic: {self.magic}]\n"
        )

    def value_of(self, stat: StatField) -> int:
        """Return the value of a single field selected by ``stat``."""

        return getattr(self, stat.value)

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return ``(health, attack, defense, magic)``."""

        return astuple(self)


ZERO = AttributeVector()


def add(a: AttributeVector, b: AttributeVector) -> AttributeVector:
    """Field-wise sum of two vectors."""

    return a + b


def subtract(a: AttributeVector, b: AttributeVector) -> AttributeVector:
    """Field-wise difference ``a - b``."""

    return a - b
