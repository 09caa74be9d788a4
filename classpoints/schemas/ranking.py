from pydantic import AliasChoices, BaseModel, Field


class RankingItem(BaseModel):
    rank: int
    student_id: int
    name: str
    class_name: str = Field(..., validation_alias=AliasChoices("class", "class_name"), serialization_alias="class")
    total_points: int
    today_change: int
