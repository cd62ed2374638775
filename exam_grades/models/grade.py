from datetime import datetime

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exam_grades.db.base_class import Base
from exam_grades.db.types import UTCDateTime


class Grade(Base):
    __tablename__ = "grades"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    assignment_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("student_assignments.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    average_score: Mapped[float] = mapped_column(Float, nullable=False)
    final_grade: Mapped[int] = mapped_column(Integer, nullable=False)
    rounding_method: Mapped[str] = mapped_column(String(10), nullable=False)

    graded_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    graded_by: Mapped[str | None] = mapped_column(String(36))

    assignment = relationship("StudentAssignment", back_populates="grade")
