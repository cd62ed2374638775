import secrets

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from exam_grades.core.config import MAGIC_TOKEN_BYTES
from exam_grades.core.deps import get_db
from exam_grades.grading.status import AssignmentStatus
from exam_grades.models.answer import StudentAnswer
from exam_grades.models.assignment import StudentAssignment
from exam_grades.models.exam import Exam
from exam_grades.models.exam_event import ExamEvent
from exam_grades.models.grade import Grade
from exam_grades.schemas.assignment import AssignmentCreate, AssignmentRead, AssignmentStats, GradingData

router = APIRouter()


@router.post("", response_model=AssignmentRead, status_code=status.HTTP_201_CREATED)
def assign_exam(payload: AssignmentCreate, db: Session = Depends(get_db)):
    exam = db.query(Exam).filter(Exam.id == payload.exam_id).first()
    if not exam:
        raise HTTPException(status_code=404, detail="Exam not found")

    assignment = StudentAssignment(
        exam_id=exam.id,
        student_id=payload.student_id,
        magic_token=secrets.token_urlsafe(MAGIC_TOKEN_BYTES),
        status=AssignmentStatus.PENDING.value,
    )
    db.add(assignment)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Magic token collision, retry")

    db.refresh(assignment)
    return assignment


@router.get("", response_model=list[AssignmentRead])
def list_assignments(
    exam_id: str | None = Query(default=None),
    student_id: str | None = Query(default=None),
    status_filter: AssignmentStatus | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
):
    q = db.query(StudentAssignment)
    if exam_id:
        q = q.filter(StudentAssignment.exam_id == exam_id)
    if student_id:
        q = q.filter(StudentAssignment.student_id == student_id)
    if status_filter:
        q = q.filter(StudentAssignment.status == status_filter.value)
    return q.order_by(StudentAssignment.assigned_at.asc(), StudentAssignment.id.asc()).all()


@router.get("/stats", response_model=AssignmentStats)
def assignment_stats(db: Session = Depends(get_db)):
    counts = dict(
        db.query(StudentAssignment.status, func.count(StudentAssignment.id))
        .group_by(StudentAssignment.status)
        .all()
    )

    submitted = int(counts.get(AssignmentStatus.SUBMITTED.value, 0))
    return {
        "total": int(sum(counts.values())),
        "pending": int(counts.get(AssignmentStatus.PENDING.value, 0)),
        "in_progress": int(counts.get(AssignmentStatus.IN_PROGRESS.value, 0)),
        "submitted": submitted,
        "graded": int(counts.get(AssignmentStatus.GRADED.value, 0)),
        "pending_review": submitted,
    }


@router.get("/token/{token}", response_model=AssignmentRead)
def get_assignment_by_token(token: str, db: Session = Depends(get_db)):
    assignment = db.query(StudentAssignment).filter(StudentAssignment.magic_token == token).first()
    if not assignment:
        raise HTTPException(status_code=404, detail="Invalid or expired link")
    return assignment


@router.get("/{assignment_id}/grading", response_model=GradingData)
def grading_data(assignment_id: str, db: Session = Depends(get_db)):
    """Everything the grading screen needs for one assignment."""
    assignment = db.query(StudentAssignment).filter(StudentAssignment.id == assignment_id).first()
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")

    answers = (
        db.query(StudentAnswer)
        .filter(StudentAnswer.assignment_id == assignment_id)
        .order_by(StudentAnswer.created_at.asc(), StudentAnswer.id.asc())
        .all()
    )
    events = (
        db.query(ExamEvent)
        .filter(ExamEvent.assignment_id == assignment_id)
        .order_by(ExamEvent.timestamp.asc())
        .all()
    )
    existing_grade = db.query(Grade).filter(Grade.assignment_id == assignment_id).first()

    return {
        "assignment": assignment,
        "answers": answers,
        "events": events,
        "existing_grade": existing_grade,
    }


@router.get("/{assignment_id}", response_model=AssignmentRead)
def get_assignment(assignment_id: str, db: Session = Depends(get_db)):
    assignment = db.query(StudentAssignment).filter(StudentAssignment.id == assignment_id).first()
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")
    return assignment
