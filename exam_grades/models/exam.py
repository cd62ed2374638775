import uuid

from sqlalchemy import Column, Integer, String, Text, func
from sqlalchemy.orm import relationship

from exam_grades.db.base_class import Base
from exam_grades.db.types import UTCDateTime


class Exam(Base):
    __tablename__ = "exams"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    teacher_id = Column(String(36), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    duration_minutes = Column(Integer, nullable=True)

    created_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)

    assignments = relationship("StudentAssignment", back_populates="exam", cascade="all, delete-orphan")
