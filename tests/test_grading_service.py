import pytest

from exam_grades.core.errors import AssignmentNotFound, GradingNotAllowed, InvalidInput, InvalidStatusTransition
from exam_grades.grading.grades import upsert_grade
from exam_grades.grading.service import finalize_from_answers, finalize_grade
from exam_grades.grading.status import AssignmentStatus, advance, can_grade
from exam_grades.repositories.base import AssignmentRecord
from exam_grades.repositories.memory import InMemoryAssignmentRepository, InMemoryGradeRepository


@pytest.fixture()
def grades():
    return InMemoryGradeRepository()


@pytest.fixture()
def assignments():
    return InMemoryAssignmentRepository(
        [
            AssignmentRecord(id="a-pending", status="pending"),
            AssignmentRecord(id="a-started", status="in_progress"),
            AssignmentRecord(id="a-submitted", status="submitted"),
        ],
        scores={"a-submitted": [2, None, 3]},
    )


def test_status_only_moves_forward():
    assert advance("pending", "in_progress") is AssignmentStatus.IN_PROGRESS
    assert advance("submitted", "graded") is AssignmentStatus.GRADED
    assert advance("graded", "graded") is AssignmentStatus.GRADED
    with pytest.raises(InvalidStatusTransition):
        advance("graded", "submitted")
    with pytest.raises(InvalidStatusTransition):
        advance("in_progress", "pending")


def test_can_grade():
    assert can_grade("submitted")
    assert can_grade("graded")
    assert not can_grade("pending")
    assert not can_grade("in_progress")


def test_upsert_creates_then_keeps_id():
    first = upsert_grade(None, "a1", 4.5, 5, "round", "t1")
    assert first.id
    assert first.assignment_id == "a1"

    second = upsert_grade(first, "a1", 2.5, 2, "floor", "t2")
    assert second.id == first.id
    assert (second.average_score, second.final_grade, second.rounding_method) == (2.5, 2, "floor")
    assert second.graded_by == "t2"
    assert second.graded_at >= first.graded_at


def test_finalize_grades_and_marks_assignment(grades, assignments):
    record = finalize_grade(grades, assignments, "a-submitted", [5, 5, 4], "round", "teacher-1")

    assert record.final_grade == 5
    assert record.average_score == pytest.approx(14 / 3)
    assert record.graded_by == "teacher-1"
    assert grades.find("a-submitted") == record
    assert assignments.get("a-submitted").status == "graded"


def test_regrading_replaces_values_keeps_id(grades, assignments):
    first = finalize_grade(grades, assignments, "a-submitted", [5, 5, 4], "round", "teacher-1")
    second = finalize_grade(grades, assignments, "a-submitted", [2, 3], "floor", "teacher-2")

    assert second.id == first.id
    assert second.final_grade == 2
    assert second.average_score == 2.5
    assert len(grades.list()) == 1


def test_same_input_twice_stores_one_grade(grades, assignments):
    first = finalize_grade(grades, assignments, "a-submitted", [3, 4], "ceil", "teacher-1")
    second = finalize_grade(grades, assignments, "a-submitted", [3, 4], "ceil", "teacher-1")

    assert second.id == first.id
    assert len(grades.list()) == 1


@pytest.mark.parametrize("assignment_id", ["a-pending", "a-started"])
def test_unsubmitted_work_is_not_graded(grades, assignments, assignment_id):
    status_before = assignments.get(assignment_id).status

    with pytest.raises(GradingNotAllowed):
        finalize_grade(grades, assignments, assignment_id, [5], "round", None)

    assert grades.find(assignment_id) is None
    assert assignments.get(assignment_id).status == status_before


def test_empty_scores_block_finalization(grades, assignments):
    with pytest.raises(InvalidInput):
        finalize_grade(grades, assignments, "a-submitted", [], "round", None)

    assert grades.find("a-submitted") is None
    assert assignments.get("a-submitted").status == "submitted"


def test_missing_assignment(grades, assignments):
    with pytest.raises(AssignmentNotFound):
        finalize_grade(grades, assignments, "nope", [4], "round", None)


def test_finalize_from_answers_skips_ungraded(grades, assignments):
    record = finalize_from_answers(grades, assignments, "a-submitted", "ceil", None)

    assert record.average_score == 2.5
    assert record.final_grade == 3
    assert record.graded_by is None


def test_repositories_are_independent():
    one = InMemoryGradeRepository()
    other = InMemoryGradeRepository()
    one.upsert(upsert_grade(None, "a1", 4.0, 4, "round", None))

    assert other.find("a1") is None
    assert one.delete("a1") is True
    assert one.delete("a1") is False
