from pydantic import BaseModel, ConfigDict, Field

from statcraft.domain.stats import AttributeVector

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class AttributeVectorBase(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    health: int = Field(0, description="Health points")
    attack: int = Field(0, description="Physical offense")
    defense: int = Field(0, description="Defense")
    magic: int = Field(0, description="Magical offense")

    def to_domain(self) -> AttributeVector:
        return AttributeVector(
            health=self.health,
            attack=self.attack,
            defense=self.defense,
            magic=self.magic,
        )


class AttributeVectorCreate(AttributeVectorBase):
    health: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Health points")
    attack: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Physical offense")
    defense: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Defense")
    magic: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Magical offense")


class AttributeVectorRead(AttributeVectorBase):
    display: str = Field(..., description="Fixed-layout rendering of the four fields")

    @classmethod
    def from_domain(cls, vector: AttributeVector) -> "AttributeVectorRead":
        return cls(
            health=vector.health,
            attack=vector.attack,
            defense=vector.defense,
            magic=vector.magic,
            display=str(vector),
        )
