"""Attribute Holder Protocol Interface.

This module defines the narrow capability through which items and professions
read and replace a character's attributes without knowing its concrete type.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from statcraft.domain.stats import AttributeVector


@runtime_checkable
class IAttributeHolder(Protocol):
    """Protocol for anything that owns an :class:`AttributeVector`.

    Only whole-vector reads and writes are exposed: callers read, compute and
    write back the full vector.
    """

    def get(self) -> AttributeVector:
        """Return a snapshot of the current attributes.

        Returns:
            The holder's current vector. Calling this has no side effects.
        """
        ...

    def set(self, vector: AttributeVector) -> None:
        """Replace the stored attributes entirely.

        Args:
            vector: New attributes. Any vector is accepted, including ones
                with negative fields.
        """
        ...


@runtime_checkable
class ILockableHolder(IAttributeHolder, Protocol):
    """Holder that can be shared between threads.

    ``lock`` must be re-entrant so that a read-modify-write sequence can hold
    it across nested ``get``/``set`` calls that acquire it themselves. A
    ``lock`` that is not a context manager (a method, a flag) does not make a
    holder lockable.
    """

    @property
    def lock(self) -> AbstractContextManager[object]:
        """Lock guarding the holder's vector."""
        ...
