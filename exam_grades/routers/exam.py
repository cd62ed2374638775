import logging
from collections import Counter
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import and_
from sqlalchemy.orm import Session

from exam_grades.core.deps import get_db
from exam_grades.grading.status import AssignmentStatus, advance
from exam_grades.models.answer import StudentAnswer
from exam_grades.models.assignment import StudentAssignment
from exam_grades.models.exam_event import ExamEvent
from exam_grades.schemas.answer import AnswerCreate, AnswerRead
from exam_grades.schemas.assignment import AssignmentAction, AssignmentRead
from exam_grades.schemas.exam_event import ExamEventCreate, ExamEventRead, ExamEventSummary

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_assignment_exists(db: Session, assignment_id: str) -> StudentAssignment:
    a = db.query(StudentAssignment).filter(StudentAssignment.id == assignment_id).first()
    if not a:
        raise HTTPException(status_code=404, detail="Assignment not found")
    return a


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


@router.post("/start", response_model=AssignmentRead)
def start_exam(payload: AssignmentAction, db: Session = Depends(get_db)):
    assignment = _ensure_assignment_exists(db, payload.assignment_id)

    new_status = advance(assignment.status, AssignmentStatus.IN_PROGRESS)
    if assignment.started_at is None:
        assignment.started_at = datetime.now(timezone.utc)
    assignment.status = new_status.value

    _commit(db)
    db.refresh(assignment)
    return assignment


@router.post("/answer", response_model=AnswerRead)
def save_answer(payload: AnswerCreate, db: Session = Depends(get_db)):
    assignment = _ensure_assignment_exists(db, payload.assignment_id)
    if assignment.status != AssignmentStatus.IN_PROGRESS.value:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Answers are only accepted while the exam is in progress (status: {assignment.status})",
        )

    # one answer per question: a second save replaces the first
    answer = (
        db.query(StudentAnswer)
        .filter(
            and_(
                StudentAnswer.assignment_id == payload.assignment_id,
                StudentAnswer.question_id == payload.question_id,
            )
        )
        .first()
    )
    if answer is None:
        answer = StudentAnswer(assignment_id=payload.assignment_id, question_id=payload.question_id)
        db.add(answer)

    answer.selected_option_id = payload.selected_option_id
    answer.answer_text = payload.answer_text
    answer.answer_numeric = payload.answer_numeric

    _commit(db)
    db.refresh(answer)
    return answer


@router.post("/submit", response_model=AssignmentRead)
def submit_exam(payload: AssignmentAction, db: Session = Depends(get_db)):
    assignment = _ensure_assignment_exists(db, payload.assignment_id)

    new_status = advance(assignment.status, AssignmentStatus.SUBMITTED)
    if assignment.submitted_at is None:
        assignment.submitted_at = datetime.now(timezone.utc)
    assignment.status = new_status.value

    _commit(db)
    db.refresh(assignment)
    logger.info("assignment %s submitted", assignment.id)
    return assignment


@router.post("/event", response_model=ExamEventRead, status_code=status.HTTP_201_CREATED)
def record_event(payload: ExamEventCreate, db: Session = Depends(get_db)):
    _ensure_assignment_exists(db, payload.assignment_id)

    event = ExamEvent(
        assignment_id=payload.assignment_id,
        event_type=payload.event_type.value,
        severity=payload.severity.value,
        timestamp=payload.timestamp,
        details=payload.details.model_dump(exclude_none=True),
    )
    db.add(event)
    _commit(db)
    db.refresh(event)

    if payload.severity.value == "critical":
        logger.warning("critical %s event on assignment %s", event.event_type, event.assignment_id)
    return event


@router.get("/event", response_model=list[ExamEventRead])
def list_events(
    assignment_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    if not assignment_id:
        raise HTTPException(status_code=400, detail="assignment_id is required")

    return (
        db.query(ExamEvent)
        .filter(ExamEvent.assignment_id == assignment_id)
        .order_by(ExamEvent.timestamp.asc(), ExamEvent.id.asc())
        .all()
    )


@router.get("/event/summary", response_model=ExamEventSummary)
def summarize_events(
    assignment_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    if not assignment_id:
        raise HTTPException(status_code=400, detail="assignment_id is required")

    events = db.query(ExamEvent).filter(ExamEvent.assignment_id == assignment_id).all()

    return {
        "assignment_id": assignment_id,
        "total": len(events),
        "by_severity": dict(Counter(e.severity for e in events)),
        "by_type": dict(Counter(e.event_type for e in events)),
    }
