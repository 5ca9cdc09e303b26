"""Enumerations used across the statcraft domain."""

from __future__ import annotations

from enum import StrEnum


class StatField(StrEnum):
    """The four attribute fields, in display order."""

    HEALTH = "health"
    ATTACK = "attack"
    DEFENSE = "defense"
    MAGIC = "magic"


class ProfessionKind(StrEnum):
    """Closed set of character professions."""

    WARRIOR = "warrior"
    SORCERER = "sorcerer"
    KNIGHT = "knight"


class ItemKind(StrEnum):
    """Closed set of equipment archetypes."""

    HELMET = "helmet"
    CHEST_PLATE = "chest_plate"
    LEGGINGS = "leggings"
    SWORD = "sword"
    BLOOD_BAG = "blood_bag"
    WAND = "wand"


class Matchup(StrEnum):
    """Outcome of comparing two professions on the effectiveness triangle."""

    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"
    NEUTRAL = "neutral"
