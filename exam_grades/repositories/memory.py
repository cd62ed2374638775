from exam_grades.grading.grades import GradeRecord
from exam_grades.repositories.base import AssignmentRecord


class InMemoryGradeRepository:
    """Dict-backed grades keyed by assignment id, for tests and local runs."""

    def __init__(self, grades: list[GradeRecord] | None = None):
        self._grades: dict[str, GradeRecord] = {g.assignment_id: g for g in grades or []}

    def find(self, assignment_id: str) -> GradeRecord | None:
        return self._grades.get(assignment_id)

    def list(self) -> list[GradeRecord]:
        return list(self._grades.values())

    def upsert(self, record: GradeRecord) -> GradeRecord:
        self._grades[record.assignment_id] = record
        return record

    def delete(self, assignment_id: str) -> bool:
        return self._grades.pop(assignment_id, None) is not None


class InMemoryAssignmentRepository:
    def __init__(
        self,
        assignments: list[AssignmentRecord] | None = None,
        scores: dict[str, list[int | None]] | None = None,
    ):
        self._assignments = {a.id: a for a in assignments or []}
        # answer scores per assignment; None marks an ungraded answer
        self._scores = dict(scores or {})

    def get(self, assignment_id: str) -> AssignmentRecord | None:
        return self._assignments.get(assignment_id)

    def set_status(self, assignment_id: str, status: str) -> None:
        current = self._assignments[assignment_id]
        self._assignments[assignment_id] = AssignmentRecord(id=current.id, status=status)

    def graded_scores(self, assignment_id: str) -> list[int]:
        return [s for s in self._scores.get(assignment_id, []) if s is not None]
