from pydantic import BaseModel, Field

from classpoints.schemas.common import LocalDateTime


class PointRecordCreateRequest(BaseModel):
    student_id: int
    points: int = Field(..., ge=-1_000_000, le=1_000_000)
    reason: str = Field(..., max_length=512)
    operator: str = Field(..., max_length=128)


class PointRecordOut(BaseModel):
    id: int
    student_id: int
    points: int
    reason: str
    operator: str
    timestamp: LocalDateTime

    model_config = {"from_attributes": True}
