import uuid

from sqlalchemy import JSON, Column, ForeignKey, String
from sqlalchemy.orm import relationship

from exam_grades.db.base_class import Base
from exam_grades.db.types import UTCDateTime


class ExamEvent(Base):
    """A proctoring signal reported by the exam client."""

    __tablename__ = "exam_events"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    assignment_id = Column(
        String(36), ForeignKey("student_assignments.id", ondelete="CASCADE"), nullable=False, index=True
    )

    event_type = Column(String(32), nullable=False)
    severity = Column(String(16), nullable=False)
    timestamp = Column(UTCDateTime(), nullable=False)
    details = Column(JSON, nullable=False, default=dict)

    assignment = relationship("StudentAssignment", back_populates="events")
