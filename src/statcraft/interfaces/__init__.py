"""Protocol-based interfaces for statcraft.

This module exports the holder capability and profession protocols, giving
collaborators a contract to implement and tests a seam to fake.
"""

from statcraft.interfaces.holder import IAttributeHolder, ILockableHolder
from statcraft.interfaces.profession import IProfession

__all__ = [
    "IAttributeHolder",
    "ILockableHolder",
    "IProfession",
]
