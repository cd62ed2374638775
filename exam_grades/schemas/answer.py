from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from exam_grades.grading.calculator import MAX_SCORE, MIN_SCORE


class AnswerCreate(BaseModel):
    assignment_id: str
    question_id: str
    selected_option_id: Optional[str] = None
    answer_text: Optional[str] = None
    answer_numeric: Optional[float] = None

    @model_validator(mode="after")
    def at_most_one_answer(self):
        given = [
            v for v in (self.selected_option_id, self.answer_text, self.answer_numeric) if v is not None
        ]
        if len(given) > 1:
            raise ValueError("an answer carries at most one of selected_option_id, answer_text, answer_numeric")
        return self


class AnswerScoreUpdate(BaseModel):
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    feedback: Optional[str] = None


class AnswerRead(BaseModel):
    id: str
    assignment_id: str
    question_id: str
    selected_option_id: Optional[str] = None
    answer_text: Optional[str] = None
    answer_numeric: Optional[float] = None
    score: Optional[int] = None
    feedback: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
