from fastapi import Depends
from sqlalchemy.orm import Session

from exam_grades.db.session import SessionLocal
from exam_grades.repositories.sql import SqlAssignmentRepository, SqlGradeRepository


# every request that needs DB will get a fresh session, and it will always close.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_grade_repository(db: Session = Depends(get_db)) -> SqlGradeRepository:
    return SqlGradeRepository(db)


def get_assignment_repository(db: Session = Depends(get_db)) -> SqlAssignmentRepository:
    return SqlAssignmentRepository(db)
