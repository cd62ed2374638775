import uuid

from sqlalchemy import Column, ForeignKey, String, func
from sqlalchemy.orm import relationship

from exam_grades.db.base_class import Base
from exam_grades.db.types import UTCDateTime
from exam_grades.grading.status import AssignmentStatus


class StudentAssignment(Base):
    """One student's instance of an exam, reachable through its magic token."""

    __tablename__ = "student_assignments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    exam_id = Column(String(36), ForeignKey("exams.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(String(36), nullable=False, index=True)

    magic_token = Column(String(64), unique=True, index=True, nullable=False)
    status = Column(String(20), nullable=False, default=AssignmentStatus.PENDING.value)

    assigned_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)
    started_at = Column(UTCDateTime(), nullable=True)
    submitted_at = Column(UTCDateTime(), nullable=True)

    exam = relationship("Exam", back_populates="assignments")

    answers = relationship("StudentAnswer", back_populates="assignment", cascade="all, delete-orphan")
    events = relationship("ExamEvent", back_populates="assignment", cascade="all, delete-orphan")
    grade = relationship("Grade", back_populates="assignment", uselist=False, cascade="all, delete-orphan")
