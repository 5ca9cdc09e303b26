from pydantic import BaseModel, Field

from .item import ItemRead
from .profession import ProfessionRead


class CatalogRead(BaseModel):
    ruleset_version: str = Field(..., description="Ruleset version the catalog follows")
    items: list[ItemRead] = Field(default_factory=list, description="Every item archetype")
    professions: list[ProfessionRead] = Field(
        default_factory=list, description="Every profession archetype"
    )
