import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone


@dataclass(frozen=True)
class GradeRecord:
    id: str
    assignment_id: str
    average_score: float
    final_grade: int
    rounding_method: str
    graded_at: datetime
    graded_by: str | None = None


def upsert_grade(
    existing: GradeRecord | None,
    assignment_id: str,
    average: float,
    final_grade: int,
    rounding_method: str,
    graded_by: str | None,
) -> GradeRecord:
    """
    Build the grade to store for an assignment.

    A first grading gets a new id; regrading overwrites the values of the
    existing record but keeps its id, so an assignment never has two grades.
    """
    now = datetime.now(timezone.utc)

    if existing is None:
        return GradeRecord(
            id=str(uuid.uuid4()),
            assignment_id=assignment_id,
            average_score=average,
            final_grade=final_grade,
            rounding_method=rounding_method,
            graded_at=now,
            graded_by=graded_by,
        )

    return replace(
        existing,
        average_score=average,
        final_grade=final_grade,
        rounding_method=rounding_method,
        graded_at=now,
        graded_by=graded_by,
    )
