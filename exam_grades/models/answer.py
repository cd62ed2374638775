import uuid

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship

from exam_grades.db.base_class import Base
from exam_grades.db.types import UTCDateTime


class StudentAnswer(Base):
    __tablename__ = "student_answers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    assignment_id = Column(
        String(36), ForeignKey("student_assignments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_id = Column(String(36), nullable=False, index=True)

    # at most one of these is set
    selected_option_id = Column(String(36), nullable=True)
    answer_text = Column(Text, nullable=True)
    answer_numeric = Column(Float, nullable=True)

    # Grading fields (nullable until graded)
    score = Column(Integer, nullable=True)
    feedback = Column(Text, nullable=True)

    created_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("assignment_id", "question_id", name="uq_answer_assignment_question"),
    )

    assignment = relationship("StudentAssignment", back_populates="answers")
