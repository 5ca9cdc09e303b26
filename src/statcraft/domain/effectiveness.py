"""Pure queries over the profession effectiveness triangle."""

from __future__ import annotations

from .enums import Matchup, ProfessionKind
from .rules_config import DEFAULT_RULES, RulesConfig


def is_effective(
    attacker: ProfessionKind,
    defender: ProfessionKind,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> bool:
    """Return ``True`` if ``attacker`` dominates ``defender``."""

    return rules.effectiveness.loser_to(attacker) == defender


def is_suppressed(
    defender: ProfessionKind,
    attacker: ProfessionKind,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> bool:
    """Return ``True`` if ``defender`` is dominated by ``attacker``."""

    return rules.effectiveness.winner_over(defender) == attacker


def resolve_matchup(
    first: ProfessionKind,
    second: ProfessionKind,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> Matchup:
    """Classify ``first`` versus ``second`` from ``first``'s point of view.

    Every pair of distinct kinds is either an advantage or a disadvantage;
    only identical kinds are neutral.
    """

    if is_effective(first, second, rules=rules):
        return Matchup.ADVANTAGE
    if is_suppressed(first, second, rules=rules):
        return Matchup.DISADVANTAGE
    return Matchup.NEUTRAL
