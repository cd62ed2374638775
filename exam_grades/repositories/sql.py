from sqlalchemy.orm import Session

from exam_grades.grading.grades import GradeRecord
from exam_grades.models.answer import StudentAnswer
from exam_grades.models.assignment import StudentAssignment
from exam_grades.models.grade import Grade
from exam_grades.repositories.base import AssignmentRecord


def _to_record(g: Grade) -> GradeRecord:
    return GradeRecord(
        id=g.id,
        assignment_id=g.assignment_id,
        average_score=g.average_score,
        final_grade=g.final_grade,
        rounding_method=g.rounding_method,
        graded_at=g.graded_at,
        graded_by=g.graded_by,
    )


class SqlGradeRepository:
    """
    Grades stored in the ``grades`` table.

    Writes are flushed, not committed; the request owns the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def find(self, assignment_id: str) -> GradeRecord | None:
        g = self.db.query(Grade).filter(Grade.assignment_id == assignment_id).first()
        return _to_record(g) if g else None

    def list(self) -> list[GradeRecord]:
        return [_to_record(g) for g in self.db.query(Grade).order_by(Grade.graded_at.desc()).all()]

    def upsert(self, record: GradeRecord) -> GradeRecord:
        g = self.db.query(Grade).filter(Grade.assignment_id == record.assignment_id).first()
        if g is None:
            g = Grade(id=record.id, assignment_id=record.assignment_id)
            self.db.add(g)

        g.average_score = record.average_score
        g.final_grade = record.final_grade
        g.rounding_method = record.rounding_method
        g.graded_at = record.graded_at
        g.graded_by = record.graded_by

        self.db.flush()
        return _to_record(g)

    def delete(self, assignment_id: str) -> bool:
        deleted = self.db.query(Grade).filter(Grade.assignment_id == assignment_id).delete()
        self.db.flush()
        return deleted > 0


class SqlAssignmentRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, assignment_id: str) -> AssignmentRecord | None:
        a = self.db.query(StudentAssignment).filter(StudentAssignment.id == assignment_id).first()
        return AssignmentRecord(id=a.id, status=a.status) if a else None

    def set_status(self, assignment_id: str, status: str) -> None:
        self.db.query(StudentAssignment).filter(StudentAssignment.id == assignment_id).update({"status": status})
        self.db.flush()

    def graded_scores(self, assignment_id: str) -> list[int]:
        rows = (
            self.db.query(StudentAnswer.score)
            .filter(
                StudentAnswer.assignment_id == assignment_id,
                StudentAnswer.score.is_not(None),
            )
            .order_by(StudentAnswer.created_at.asc(), StudentAnswer.id.asc())
            .all()
        )
        return [r.score for r in rows]
