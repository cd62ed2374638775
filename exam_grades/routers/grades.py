from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from exam_grades.core.deps import get_assignment_repository, get_db, get_grade_repository
from exam_grades.grading.service import finalize_from_answers, finalize_grade
from exam_grades.models.answer import StudentAnswer
from exam_grades.repositories.sql import SqlAssignmentRepository, SqlGradeRepository
from exam_grades.schemas.answer import AnswerRead, AnswerScoreUpdate
from exam_grades.schemas.grade import GradeFinalize, GradeRead, GradeSubmit

router = APIRouter()


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def _grade_conflict(db: Session) -> HTTPException:
    # another request stored the first grade for this assignment in the meantime
    db.rollback()
    return HTTPException(status_code=409, detail="Assignment was graded concurrently, retry")


@router.post("/submit", response_model=GradeRead)
def submit_grade(
    payload: GradeSubmit,
    db: Session = Depends(get_db),
    grades: SqlGradeRepository = Depends(get_grade_repository),
    assignments: SqlAssignmentRepository = Depends(get_assignment_repository),
):
    try:
        record = finalize_grade(
            grades,
            assignments,
            payload.assignment_id,
            payload.scores,
            payload.rounding_method,
            payload.graded_by,
        )
        db.commit()
    except IntegrityError:
        raise _grade_conflict(db)
    return record


@router.post("/assignments/{assignment_id}/finalize", response_model=GradeRead)
def finalize_assignment_grade(
    assignment_id: str,
    payload: GradeFinalize,
    db: Session = Depends(get_db),
    grades: SqlGradeRepository = Depends(get_grade_repository),
    assignments: SqlAssignmentRepository = Depends(get_assignment_repository),
):
    # grade from the per-answer scores already stored; ungraded answers are skipped
    try:
        record = finalize_from_answers(
            grades,
            assignments,
            assignment_id,
            payload.rounding_method,
            payload.graded_by,
        )
        db.commit()
    except IntegrityError:
        raise _grade_conflict(db)
    return record


@router.get("", response_model=list[GradeRead])
def list_grades(grades: SqlGradeRepository = Depends(get_grade_repository)):
    return grades.list()


@router.get("/{assignment_id}", response_model=GradeRead)
def get_grade(assignment_id: str, grades: SqlGradeRepository = Depends(get_grade_repository)):
    record = grades.find(assignment_id)
    if not record:
        raise HTTPException(status_code=404, detail="Grade not found")
    return record


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_grade(
    assignment_id: str,
    db: Session = Depends(get_db),
    grades: SqlGradeRepository = Depends(get_grade_repository),
):
    # the assignment keeps its graded status; it is never moved backward
    if not grades.delete(assignment_id):
        raise HTTPException(status_code=404, detail="Grade not found")
    _commit(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/answer/{answer_id}", response_model=AnswerRead)
def grade_answer(
    answer_id: str,
    payload: AnswerScoreUpdate,
    db: Session = Depends(get_db),
):
    answer = db.query(StudentAnswer).filter(StudentAnswer.id == answer_id).first()
    if not answer:
        raise HTTPException(status_code=404, detail="Answer not found")

    answer.score = payload.score
    answer.feedback = payload.feedback

    _commit(db)
    db.refresh(answer)
    return answer
