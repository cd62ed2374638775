from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from exam_grades.core.deps import get_db
from exam_grades.grading.status import AssignmentStatus
from exam_grades.models.assignment import StudentAssignment
from exam_grades.models.exam import Exam
from exam_grades.models.grade import Grade
from exam_grades.schemas.exam import ExamCreate, ExamRead, ExamResults

router = APIRouter()


@router.get("", response_model=list[ExamRead])
def list_exams(db: Session = Depends(get_db)):
    return db.query(Exam).order_by(Exam.created_at.desc()).all()


@router.post("", response_model=ExamRead, status_code=status.HTTP_201_CREATED)
def create_exam(payload: ExamCreate, db: Session = Depends(get_db)):
    exam = Exam(
        teacher_id=payload.teacher_id,
        title=payload.title,
        description=payload.description,
        duration_minutes=payload.duration_minutes,
    )
    db.add(exam)
    db.commit()
    db.refresh(exam)
    return exam


@router.get("/{exam_id}/results", response_model=ExamResults)
def exam_results(exam_id: str, db: Session = Depends(get_db)):
    """Every student's assignment for one exam with its grade, plus totals."""
    exam = db.query(Exam).filter(Exam.id == exam_id).first()
    if not exam:
        raise HTTPException(status_code=404, detail="Exam not found")

    rows = (
        db.query(StudentAssignment, Grade)
        .outerjoin(Grade, Grade.assignment_id == StudentAssignment.id)
        .filter(StudentAssignment.exam_id == exam_id)
        .order_by(StudentAssignment.student_id.asc(), StudentAssignment.id.asc())
        .all()
    )

    statuses = [a.status for a, _g in rows]
    averages = [g.average_score for _a, g in rows if g is not None]

    return {
        "exam": exam,
        "student_assignments": [{"assignment": a, "grade": g} for a, g in rows],
        "stats": {
            "total": len(rows),
            "submitted": statuses.count(AssignmentStatus.SUBMITTED.value),
            "graded": statuses.count(AssignmentStatus.GRADED.value),
            "pending": statuses.count(AssignmentStatus.PENDING.value)
            + statuses.count(AssignmentStatus.IN_PROGRESS.value),
            "average_score": sum(averages) / len(averages) if averages else None,
        },
    }
