from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from exam_grades.schemas.answer import AnswerRead
from exam_grades.schemas.exam_event import ExamEventRead
from exam_grades.schemas.grade import GradeRead


class AssignmentCreate(BaseModel):
    exam_id: str
    student_id: str


class AssignmentAction(BaseModel):
    assignment_id: str


class AssignmentRead(BaseModel):
    id: str
    exam_id: str
    student_id: str
    magic_token: str
    status: str
    assigned_at: datetime
    started_at: Optional[datetime] = None
    submitted_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AssignmentStats(BaseModel):
    total: int
    pending: int
    in_progress: int
    submitted: int
    graded: int
    pending_review: int  # submitted, waiting for the teacher


class GradingData(BaseModel):
    assignment: AssignmentRead
    answers: list[AnswerRead]
    events: list[ExamEventRead]
    existing_grade: Optional[GradeRead] = None


class StudentResult(BaseModel):
    assignment: AssignmentRead
    grade: Optional[GradeRead] = None


class ExamResultStats(BaseModel):
    total: int
    submitted: int
    graded: int
    pending: int  # not handed in yet: pending or in_progress
    average_score: Optional[float] = None  # mean of graded averages, None until something is graded
