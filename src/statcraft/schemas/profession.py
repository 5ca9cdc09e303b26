from pydantic import BaseModel, Field

from statcraft.domain.enums import ProfessionKind, StatField
from statcraft.domain.professions import Profession

from .stats import AttributeVectorRead


class ProfessionRead(BaseModel):
    kind: ProfessionKind = Field(..., description="Profession discriminant")
    name: str = Field(..., min_length=1, description="Display name of the profession")
    base_stats: AttributeVectorRead = Field(..., description="Base attributes of the archetype")
    offense_field: StatField = Field(..., description="Field read by attack_points")
    effective_against: ProfessionKind = Field(
        ..., description="Kind this profession dominates"
    )
    suppressed_by: ProfessionKind = Field(..., description="Kind that dominates this profession")

    @classmethod
    def from_domain(cls, profession: Profession) -> "ProfessionRead":
        effectiveness = profession.rules.effectiveness
        return cls(
            kind=profession.kind,
            name=profession.name,
            base_stats=AttributeVectorRead.from_domain(profession.base_stats),
            offense_field=profession.offense_field,
            effective_against=effectiveness.loser_to(profession.kind),
            suppressed_by=effectiveness.winner_over(profession.kind),
        )
