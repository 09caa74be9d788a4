from pydantic import AliasChoices, BaseModel, Field

from classpoints.schemas.common import LocalDateTime


class StudentOut(BaseModel):
    id: int
    name: str
    class_name: str = Field(..., validation_alias=AliasChoices("class", "class_name"), serialization_alias="class")
    total_points: int
    created_at: LocalDateTime
    updated_at: LocalDateTime

    model_config = {"from_attributes": True}


class StudentWriteRequest(BaseModel):
    name: str = Field(..., max_length=128)
    class_name: str = Field(
        ..., max_length=128, validation_alias=AliasChoices("class", "class_name"), serialization_alias="class"
    )
