"""Domain model for statcraft.

The package is split leaf-first:

* :mod:`enums` and :mod:`stats` hold the discriminants and the
  :class:`~statcraft.domain.stats.AttributeVector` value type.
* :mod:`rules_config` and :mod:`effectiveness` describe the profession
  effectiveness triangle as data plus pure queries.
* :mod:`holders`, :mod:`items` and :mod:`professions` build on the holder
  capability from :mod:`statcraft.interfaces`.

Only the leaf modules are imported eagerly here; the others depend on
:mod:`statcraft.interfaces`, which itself imports :mod:`stats`.
"""

from . import effectiveness, enums, rules_config, stats

__all__ = [
    "effectiveness",
    "enums",
    "rules_config",
    "stats",
]
