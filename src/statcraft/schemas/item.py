from pydantic import BaseModel, Field

from statcraft.domain.enums import ItemKind
from statcraft.domain.items import Item

from .stats import AttributeVectorRead


class ItemRead(BaseModel):
    kind: ItemKind = Field(..., description="Item archetype")
    name: str = Field(..., min_length=1, description="Display name of the archetype")
    delta: AttributeVectorRead = Field(..., description="Attribute change applied on use")

    @classmethod
    def from_domain(cls, item: Item) -> "ItemRead":
        return cls(
            kind=item.kind,
            name=item.name,
            delta=AttributeVectorRead.from_domain(item.delta),
        )
