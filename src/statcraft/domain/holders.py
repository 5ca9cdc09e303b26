"""Reference implementations of the attribute holder capability.

Real characters live in collaborating code; these holders cover tests, tools
and any caller that only needs somewhere to keep a vector.
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from threading import RLock

from statcraft.config import Settings, get_settings
from statcraft.interfaces.holder import IAttributeHolder, ILockableHolder

from .stats import ZERO, AttributeVector

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StatHolder:
    """Single-owner holder with no synchronization."""

    vector: AttributeVector = ZERO

    def get(self) -> AttributeVector:
        return self.vector

    def set(self, vector: AttributeVector) -> None:
        self.vector = vector


@dataclass(slots=True)
class SynchronizedStatHolder:
    """Holder safe to share between threads.

    ``get`` and ``set`` each take the lock; callers performing a
    read-modify-write hold :attr:`lock` around the whole sequence (see
    :func:`holder_lock`).
    """

    vector: AttributeVector = ZERO
    _lock: RLock = field(default_factory=RLock, init=False, repr=False, compare=False)

    @property
    def lock(self) -> RLock:
        return self._lock

    def get(self) -> AttributeVector:
        with self._lock:
            return self.vector

    def set(self, vector: AttributeVector) -> None:
        with self._lock:
            self.vector = vector


def holder_lock(target: IAttributeHolder) -> AbstractContextManager[object]:
    """Return the lock guarding ``target`` or a no-op context if it has none.

    Only a ``lock`` attribute that is itself a context manager counts; a
    ``lock()`` method or a flag is ignored.  The lock must be re-entrant when
    ``target.get``/``target.set`` acquire it too (see :class:`ILockableHolder`).
    """

    if isinstance(target, ILockableHolder):
        lock = target.lock
        if isinstance(lock, AbstractContextManager):
            return lock
    return nullcontext()


def create_holder(
    initial: AttributeVector = ZERO,
    *,
    settings: Settings | None = None,
) -> StatHolder | SynchronizedStatHolder:
    """Create a holder seeded with ``initial``.

    ``settings.synchronized_holders`` selects the thread-safe variant.
    """

    settings = settings or get_settings()
    if settings.synchronized_holders:
        holder: StatHolder | SynchronizedStatHolder = SynchronizedStatHolder(initial)
    else:
        holder = StatHolder(initial)
    logger.debug("created %s with %r", type(holder).__name__, initial)
    return holder
