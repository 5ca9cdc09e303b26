"""Declarative rule configuration for the profession effectiveness triangle."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .enums import ProfessionKind


class RulesConfigError(ValueError):
    """Raised when a rules table violates its structural invariants."""


_CANONICAL_CYCLE: dict[ProfessionKind, ProfessionKind] = {
    ProfessionKind.WARRIOR: ProfessionKind.KNIGHT,
    ProfessionKind.KNIGHT: ProfessionKind.SORCERER,
    ProfessionKind.SORCERER: ProfessionKind.WARRIOR,
}


def _validate_cycle(beats: Mapping[ProfessionKind, ProfessionKind]) -> None:
    kinds = set(ProfessionKind)
    if set(beats) != kinds:
        missing = sorted(kinds - set(beats))
        raise RulesConfigError(f"effectiveness table must cover every profession, missing {missing}")
    unknown = [defender for defender in beats.values() if defender not in kinds]
    if unknown:
        raise RulesConfigError(f"effectiveness table names unknown professions {unknown}")

    # Walking the table from any kind must visit every kind once before returning.
    start = next(iter(beats))
    visited = [start]
    current = beats[start]
    while current != start:
        if current in visited:
            raise RulesConfigError("every profession must be beaten by exactly one other profession")
        visited.append(current)
        current = beats[current]
    if len(visited) != len(kinds):
        raise RulesConfigError(f"effectiveness table must form a single {len(kinds)}-cycle")


@dataclass(frozen=True, slots=True)
class EffectivenessRules:
    """Which profession each profession is effective against.

    Suppression is the inverse of ``beats`` and is never configured
    separately.
    """

    beats: Mapping[ProfessionKind, ProfessionKind] = field(
        default_factory=lambda: dict(_CANONICAL_CYCLE)
    )

    def __post_init__(self) -> None:
        _validate_cycle(self.beats)
        normalized = {
            ProfessionKind(attacker): ProfessionKind(defender)
            for attacker, defender in self.beats.items()
        }
        object.__setattr__(self, "beats", MappingProxyType(normalized))

    def __hash__(self) -> int:
        return hash(frozenset(self.beats.items()))

    def winner_over(self, kind: ProfessionKind) -> ProfessionKind:
        """Return the kind that is effective against ``kind``."""

        for attacker, defender in self.beats.items():
            if defender == kind:
                return attacker
        raise RulesConfigError(f"no profession is effective against {kind}")

    def loser_to(self, kind: ProfessionKind) -> ProfessionKind:
        """Return the kind that ``kind`` is effective against."""

        return self.beats[kind]


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all rule tables."""

    effectiveness: EffectivenessRules = EffectivenessRules()


DEFAULT_RULES = RulesConfig()
