"""Character professions and how they read a holder's attributes.

Professions only relate to each other through their :class:`ProfessionKind`.
Which kind beats which comes from the rules table, so ``is_effective_against``
and ``is_suppressed_by`` are two views of the same cycle.

Base stats are kept for display and for seeding characters elsewhere; the
scoring queries read the holder passed to them, never ``base_stats``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from statcraft.interfaces.holder import IAttributeHolder
from statcraft.interfaces.profession import IProfession

from .effectiveness import is_effective, is_suppressed, resolve_matchup
from .enums import Matchup, ProfessionKind, StatField
from .rules_config import DEFAULT_RULES, RulesConfig
from .stats import AttributeVector


@dataclass(frozen=True, slots=True)
class Profession:
    """Base for profession archetypes.

    Subclasses set ``kind``, ``name``, ``base_stats`` and ``offense_field``.
    """

    kind: ClassVar[ProfessionKind]
    name: ClassVar[str]
    base_stats: ClassVar[AttributeVector]
    offense_field: ClassVar[StatField]
    defense_field: ClassVar[StatField] = StatField.DEFENSE

    rules: RulesConfig = DEFAULT_RULES

    def __post_init__(self) -> None:
        if type(self) is Profession:
            raise TypeError("Profession is a base class; create one such as Warrior")

    def is_effective_against(self, other: IProfession) -> bool:
        return is_effective(self.kind, other.kind, rules=self.rules)

    def is_suppressed_by(self, other: IProfession) -> bool:
        return is_suppressed(self.kind, other.kind, rules=self.rules)

    def matchup(self, other: IProfession) -> Matchup:
        return resolve_matchup(self.kind, other.kind, rules=self.rules)

    def attack_points(self, holder: IAttributeHolder) -> int:
        """Read this profession's offense field from the holder's snapshot."""

        return holder.get().value_of(self.offense_field)

    def defense_points(self, holder: IAttributeHolder) -> int:
        """Read the defense field from the holder's snapshot."""

        return holder.get().value_of(self.defense_field)


@dataclass(frozen=True, slots=True)
class Warrior(Profession):
    kind = ProfessionKind.WARRIOR
    name = "Warrior"
    base_stats = AttributeVector(health=90, attack=40, defense=55, magic=0)
    offense_field = StatField.ATTACK


@dataclass(frozen=True, slots=True)
class Sorcerer(Profession):
    kind = ProfessionKind.SORCERER
    name = "Sorcerer"
    base_stats = AttributeVector(health=70, attack=0, defense=20, magic=50)
    offense_field = StatField.MAGIC


@dataclass(frozen=True, slots=True)
class Knight(Profession):
    kind = ProfessionKind.KNIGHT
    name = "Knight"
    base_stats = AttributeVector(health=100, attack=40, defense=30, magic=0)
    offense_field = StatField.ATTACK


PROFESSION_TYPES: Mapping[ProfessionKind, type[Profession]] = MappingProxyType(
    {
        profession_type.kind: profession_type
        for profession_type in (Warrior, Sorcerer, Knight)
    }
)
