import logging
from typing import Sequence

from exam_grades.core.errors import AssignmentNotFound, GradingNotAllowed
from exam_grades.grading.calculator import RoundingMethod, calculate
from exam_grades.grading.grades import GradeRecord, upsert_grade
from exam_grades.grading.status import AssignmentStatus, advance, can_grade
from exam_grades.repositories.base import AssignmentRepository, GradeRepository

logger = logging.getLogger(__name__)


def finalize_grade(
    grades: GradeRepository,
    assignments: AssignmentRepository,
    assignment_id: str,
    scores: Sequence[int],
    rounding_method: RoundingMethod | str,
    graded_by: str | None,
) -> GradeRecord:
    """
    Compute and store the final grade for a submitted assignment.

    Raises AssignmentNotFound, GradingNotAllowed (not yet submitted) or
    InvalidInput (no scores). On success the assignment is marked graded.
    """
    assignment = assignments.get(assignment_id)
    if assignment is None:
        raise AssignmentNotFound(assignment_id)

    if not can_grade(assignment.status):
        logger.warning("refusing to grade assignment %s in status %s", assignment_id, assignment.status)
        raise GradingNotAllowed(assignment_id, assignment.status)

    method = RoundingMethod(rounding_method)
    average, final_grade = calculate(scores, method)

    record = upsert_grade(
        grades.find(assignment_id),
        assignment_id=assignment_id,
        average=average,
        final_grade=final_grade,
        rounding_method=method.value,
        graded_by=graded_by,
    )
    record = grades.upsert(record)

    new_status = advance(assignment.status, AssignmentStatus.GRADED)
    assignments.set_status(assignment_id, new_status.value)

    logger.info(
        "graded assignment %s: average=%.3f final=%s (%s)",
        assignment_id,
        average,
        final_grade,
        method.value,
    )
    return record


def finalize_from_answers(
    grades: GradeRepository,
    assignments: AssignmentRepository,
    assignment_id: str,
    rounding_method: RoundingMethod | str,
    graded_by: str | None,
) -> GradeRecord:
    # ungraded answers are already excluded by the repository
    scores = assignments.graded_scores(assignment_id)
    return finalize_grade(grades, assignments, assignment_id, scores, rounding_method, graded_by)
