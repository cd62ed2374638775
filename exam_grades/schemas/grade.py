from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from exam_grades.core.config import DEFAULT_ROUNDING_METHOD
from exam_grades.grading.calculator import MAX_SCORE, MIN_SCORE, RoundingMethod


class GradeSubmit(BaseModel):
    assignment_id: str
    # an empty list is accepted here and rejected by the calculator
    scores: list[int] = Field(default_factory=list)
    rounding_method: RoundingMethod = RoundingMethod(DEFAULT_ROUNDING_METHOD)
    graded_by: Optional[str] = None


class GradeFinalize(BaseModel):
    rounding_method: RoundingMethod = RoundingMethod(DEFAULT_ROUNDING_METHOD)
    graded_by: Optional[str] = None


class GradeRead(BaseModel):
    id: str
    assignment_id: str
    average_score: float
    final_grade: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    rounding_method: str
    graded_at: datetime
    graded_by: Optional[str] = None

    class Config:
        from_attributes = True
