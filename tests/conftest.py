import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from exam_grades.core.deps import get_db
from exam_grades.db.base_class import Base
from exam_grades.main import app
from exam_grades.models.answer import StudentAnswer
from exam_grades.models.assignment import StudentAssignment
from exam_grades.models.exam import Exam
from exam_grades.models.exam_event import ExamEvent
from exam_grades.models.grade import Grade

TEST_DB_FILE = "test_exam_grades.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEACHER_ID = "teacher-1"
EXAM_ID = "exam-1"

# one assignment per lifecycle state
ASSIGNMENTS = {
    "pending": "assign-pending",
    "in_progress": "assign-in-progress",
    "submitted": "assign-submitted",
    "graded": "assign-graded",
}


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed_data():
    """Seed a clean minimal dataset for each test."""
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        db.query(ExamEvent).delete()
        db.query(StudentAnswer).delete()
        db.query(Grade).delete()
        db.query(StudentAssignment).delete()
        db.query(Exam).delete()
        db.commit()

        db.add(Exam(id=EXAM_ID, teacher_id=TEACHER_ID, title="Calculus I - Midterm", duration_minutes=90))
        db.commit()

        for n, (status_val, assignment_id) in enumerate(ASSIGNMENTS.items()):
            db.add(
                StudentAssignment(
                    id=assignment_id,
                    exam_id=EXAM_ID,
                    student_id=f"student-{n}",
                    magic_token=f"token-{assignment_id}",
                    status=status_val,
                )
            )
        db.commit()

        # submitted assignment has two scored answers and one still ungraded
        for question_id, score in (("q1", 5), ("q2", 4), ("q3", None)):
            db.add(
                StudentAnswer(
                    assignment_id=ASSIGNMENTS["submitted"],
                    question_id=question_id,
                    answer_text=f"answer to {question_id}",
                    score=score,
                )
            )
        db.commit()

        yield
    finally:
        db.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
