"""Profession Protocol Interface.

This module defines the protocol for character professions: their kind, their
place on the effectiveness triangle and how they interpret a holder's
attributes.
"""

from __future__ import annotations

from typing import Protocol

from statcraft.domain.enums import Matchup, ProfessionKind
from statcraft.domain.stats import AttributeVector
from statcraft.interfaces.holder import IAttributeHolder


class IProfession(Protocol):
    """Protocol defining the contract for profession archetypes."""

    @property
    def kind(self) -> ProfessionKind:
        """Discriminant of the profession."""
        ...

    @property
    def base_stats(self) -> AttributeVector:
        """Base attributes of the archetype, for display and reference."""
        ...

    def is_effective_against(self, other: IProfession) -> bool:
        """Return ``True`` if this profession dominates ``other``."""
        ...

    def is_suppressed_by(self, other: IProfession) -> bool:
        """Return ``True`` if ``other`` dominates this profession."""
        ...

    def matchup(self, other: IProfession) -> Matchup:
        """Classify the pairing from this profession's point of view."""
        ...

    def attack_points(self, holder: IAttributeHolder) -> int:
        """Offense score read from the holder's current attributes.

        Args:
            holder: Holder whose snapshot is interpreted. It is not modified.

        Returns:
            The field this profession treats as offense.
        """
        ...

    def defense_points(self, holder: IAttributeHolder) -> int:
        """Defense score read from the holder's current attributes."""
        ...
