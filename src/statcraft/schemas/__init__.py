from .catalog import CatalogRead
from .item import ItemRead
from .profession import ProfessionRead
from .stats import AttributeVectorBase, AttributeVectorCreate, AttributeVectorRead

__all__ = [
    "AttributeVectorBase",
    "AttributeVectorCreate",
    "AttributeVectorRead",
    "CatalogRead",
    "ItemRead",
    "ProfessionRead",
]
