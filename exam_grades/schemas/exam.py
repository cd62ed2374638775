from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from exam_grades.schemas.assignment import ExamResultStats, StudentResult


class ExamCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    teacher_id: str


class ExamRead(BaseModel):
    id: str
    teacher_id: str
    title: str
    description: Optional[str]
    duration_minutes: Optional[int]
    created_at: datetime

    class Config:
        from_attributes = True


class ExamResults(BaseModel):
    exam: ExamRead
    student_assignments: list[StudentResult]
    stats: ExamResultStats
