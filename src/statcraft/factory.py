"""Catalog factory for statcraft.

This module builds items and professions from their kind, so callers holding a
kind read from configuration or user input never import the concrete classes.

Example:
    from statcraft.domain.enums import ProfessionKind
    from statcraft.factory import create_item, create_profession

    sword = create_item("sword")
    knight = create_profession(ProfessionKind.KNIGHT)
    sword.apply_effect(character)
    knight.attack_points(character)
"""

from __future__ import annotations

import logging

from statcraft.config import Settings, get_settings
from statcraft.domain.enums import ItemKind, ProfessionKind
from statcraft.domain.items import ITEM_TYPES, Item
from statcraft.domain.professions import PROFESSION_TYPES, Profession
from statcraft.domain.rules_config import DEFAULT_RULES, RulesConfig
from statcraft.schemas import CatalogRead, ItemRead, ProfessionRead

logger = logging.getLogger(__name__)


def create_item(kind: ItemKind | str) -> Item:
    """Create the item archetype named by ``kind``.

    Args:
        kind: An :class:`ItemKind` or its string value (e.g. ``"blood_bag"``)

    Returns:
        A new item instance

    Raises:
        ValueError: If ``kind`` names no item
    """
    try:
        item_kind = ItemKind(kind)
    except ValueError:
        raise ValueError(f"Unknown item kind: {kind!r}") from None
    return ITEM_TYPES[item_kind]()


def create_profession(
    kind: ProfessionKind | str,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> Profession:
    """Create the profession named by ``kind``.

    Args:
        kind: A :class:`ProfessionKind` or its string value (e.g. ``"knight"``)
        rules: Rule tables the profession consults for effectiveness

    Returns:
        A new profession instance

    Raises:
        ValueError: If ``kind`` names no profession
    """
    try:
        profession_kind = ProfessionKind(kind)
    except ValueError:
        raise ValueError(f"Unknown profession kind: {kind!r}") from None
    return PROFESSION_TYPES[profession_kind](rules=rules)


def all_items() -> list[Item]:
    """Return one instance of every item archetype, in declaration order."""

    return [create_item(kind) for kind in ItemKind]


def all_professions(*, rules: RulesConfig = DEFAULT_RULES) -> list[Profession]:
    """Return one instance of every profession, in declaration order."""

    return [create_profession(kind, rules=rules) for kind in ProfessionKind]


def build_catalog(
    *,
    rules: RulesConfig = DEFAULT_RULES,
    settings: Settings | None = None,
) -> CatalogRead:
    """Describe every archetype as a read model for renderers."""

    settings = settings or get_settings()
    catalog = CatalogRead(
        ruleset_version=settings.rules_version,
        items=[ItemRead.from_domain(item) for item in all_items()],
        professions=[
            ProfessionRead.from_domain(profession) for profession in all_professions(rules=rules)
        ],
    )
    logger.debug(
        "built catalog %s with %d items and %d professions",
        catalog.ruleset_version,
        len(catalog.items),
        len(catalog.professions),
    )
    return catalog
